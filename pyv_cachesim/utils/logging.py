import logging
def get_logger(name:str="pyv_cachesim", level:str|None=None):
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    logger = logging.getLogger(name)
    if level:
        logger.setLevel(level.upper())
    return logger
