import sys
import os

# Add the repository root to the Python path so 'pyv_cachesim' resolves
# without an editable install.
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
