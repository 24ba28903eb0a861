from typing import Sequence

import pandas as pd

from flight_quality.report import InconsistencyReport
from flight_quality.schema import Finding


def findings_by_section(report: InconsistencyReport) -> pd.DataFrame:
    """
    Counts findings per report section.

    Args:
        report: The result of build_report.

    Returns:
        A DataFrame with columns ``section`` and ``findings``, in report order.
    """
    rows = [
        {'section': section.title.rstrip(':'), 'findings': len(section.findings)}
        for section in report.sections
    ]
    return pd.DataFrame(rows, columns=['section', 'findings'])


def findings_by_aircraft(findings: Sequence[Finding], top_n: int = 10) -> pd.DataFrame:
    """
    Counts findings per aircraft registration, busiest first.
    Findings without an aircraft are counted under "Unknown".
    """
    if not findings:
        return pd.DataFrame(columns=['aircraft', 'findings'])

    df = pd.DataFrame({
        'aircraft': [f.aircraft or 'Unknown' for f in findings],
        'kind': [f.kind.value for f in findings],
    })
    summary = df.groupby('aircraft').agg(findings=('kind', 'count')).reset_index()
    return summary.sort_values(by=['findings', 'aircraft'], ascending=[False, True]).head(top_n).reset_index(drop=True)
