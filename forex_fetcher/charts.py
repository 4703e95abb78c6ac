import plotly.express as px
import pandas as pd

from forex_fetcher.config import CHART_HEIGHT

def line(df: pd.DataFrame, x: str, y: str, title: str, hover_data=None):
    fig = px.line(df, x=x, y=y, title=title, hover_data=hover_data)
    fig.update_layout(height=CHART_HEIGHT, margin=dict(l=10, r=10, t=40, b=10), xaxis_title="Sample", yaxis_title="Rate")
    return fig
