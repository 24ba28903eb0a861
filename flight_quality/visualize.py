import os
import sys

import pandas as pd
import plotly.graph_objects as go


def build_findings_by_section_figure(section_df: pd.DataFrame) -> go.Figure:
    """
    Bar chart of finding counts per report section.

    Args:
        section_df: DataFrame from kpis.findings_by_section.
    """
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=section_df['section'],
        y=section_df['findings'],
        name='Findings',
        marker_color='indianred'
    ))
    fig.update_layout(
        title_text='<b>Findings by Check</b>',
        xaxis_title='Check',
        yaxis_title='Number of Findings',
        template='plotly_white'
    )
    return fig


def build_findings_by_aircraft_figure(aircraft_df: pd.DataFrame) -> go.Figure:
    """Horizontal bar chart of the aircraft with the most findings."""
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=aircraft_df['findings'],
        y=aircraft_df['aircraft'],
        orientation='h',
        name='Findings',
        marker_color='lightsalmon'
    ))
    fig.update_layout(
        title_text='<b>Aircraft with the Most Findings</b>',
        xaxis_title='Number of Findings',
        yaxis_title='Aircraft Registration',
        yaxis=dict(autorange='reversed'),
        template='plotly_white'
    )
    return fig


def plot_findings_by_section(section_df: pd.DataFrame, output_path: str):
    print("Generating findings by check plot...")
    build_findings_by_section_figure(section_df).write_html(output_path)
    print(f"Saved findings by check plot to {output_path}")


def plot_findings_by_aircraft(aircraft_df: pd.DataFrame, output_path: str):
    print("Generating findings by aircraft plot...")
    build_findings_by_aircraft_figure(aircraft_df).write_html(output_path)
    print(f"Saved findings by aircraft plot to {output_path}")


if __name__ == '__main__':
    from flight_quality.kpis import findings_by_aircraft, findings_by_section
    from flight_quality.load import load_flights
    from flight_quality.report import build_report

    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    data_path = sys.argv[1] if len(sys.argv) > 1 else os.path.join(project_root, 'data', 'flights.csv')

    report = build_report(load_flights(data_path))
    if report.is_clean:
        print("No inconsistencies found; nothing to plot.")
    else:
        plots_dir = os.path.join(project_root, 'outputs', 'plots')
        os.makedirs(plots_dir, exist_ok=True)

        plot_findings_by_section(findings_by_section(report), os.path.join(plots_dir, 'findings_by_check.html'))
        plot_findings_by_aircraft(findings_by_aircraft(report.findings), os.path.join(plots_dir, 'findings_by_aircraft.html'))
