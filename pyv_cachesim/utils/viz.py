import plotly.express as px
import pandas as pd

def export_hit_miss_chart(runs, path: str):
    if not runs:
        with open(path, "w") as f:
            f.write("<h1>Cache Hits and Misses</h1><p>No data to display.</p>")
        return

    rows = []
    for run in runs:
        rows.append({'label': run['label'], 'outcome': 'hits', 'count': run['stats']['hits']})
        rows.append({'label': run['label'], 'outcome': 'misses', 'count': run['stats']['misses']})
    df = pd.DataFrame(rows)
    df['count'] = pd.to_numeric(df['count'], errors='coerce')
    df = df.dropna(subset=['count'])

    fig = px.bar(
        df,
        x="label",
        y="count",
        color="outcome",
        barmode="group",
        text="count",
        title="Cache Hits and Misses per Configuration",
        labels={"label": "Configuration", "count": "References", "outcome": "Outcome"}
    )

    fig.update_layout(
        font=dict(family="Courier New, monospace", size=12),
        legend_title="Outcome"
    )

    fig.write_html(path, include_plotlyjs="cdn", full_html=True)

def export_hit_miss_ascii(runs):
    if not runs:
        return "No runs to display."

    max_count = max(max(run['stats']['hits'], run['stats']['misses']) for run in runs)
    if max_count == 0:
        return "No references were simulated."

    scale = 60.0 / max_count # Scale to 60 characters width
    width = max(len(run['label']) for run in runs)

    chart = ""
    chart += "Cache Hits/Misses (ASCII Bar Chart)\n"
    chart += "" + ("-" * 80) + "\n"

    for run in runs:
        hits = run['stats']['hits']
        misses = run['stats']['misses']
        chart += f"{run['label']:>{width}} hits   |{'H' * int(hits * scale):<60}| {hits}\n"
        chart += f"{'':>{width}} misses |{'M' * int(misses * scale):<60}| {misses}\n"

    chart += "" + ("-" * 80) + "\n"

    return chart
