# burn_severity/report.py
import pandas as pd

from .config import N_CLASSES

REPORT_COLUMNS = ['Class', 'Hectares', 'Pixels', 'Percentage']
INDEX_NAME = 'system:index'


def build_report(area_stats):
    """
    Builds the burned area table of one region from its ClassStat records.

    Rows are in class index order (0-7). df.to_csv(path) writes the
    'system:index,Class,Hectares,Pixels,Percentage' layout.
    """
    ordered = sorted(area_stats, key=lambda stat: stat.class_index)
    if [stat.class_index for stat in ordered] != list(range(N_CLASSES)):
        raise ValueError(
            f"Expected one record per class 0-{N_CLASSES - 1}, "
            f"got classes {[stat.class_index for stat in ordered]}")

    df = pd.DataFrame(
        [{
            'Class': stat.name,
            'Hectares': stat.hectares,
            'Pixels': stat.pixels,
            'Percentage': stat.percentage,
        } for stat in ordered],
        columns=REPORT_COLUMNS,
    )
    df.index.name = INDEX_NAME
    return df
