# burn_severity/__init__.py

# import own library
# platform_info: NIR/SWIR2 band names and resolution per platform, used by read_nbr
from .config import AnalysisConfig, CLASS_NAMES, DEFAULT_THRESHOLDS, platform_info
from .errors import (BurnSeverityError, InvalidThresholdTableError, NoValidPixelsError,
                     RegionTooLargeError, ShapeMismatchError)
from .legend import legend_entries, severity_colormap
from .local_analysis import (ClassStat, calculate_area, calculate_dnbr, calculate_nbr,
                             classify_severity, count_valid_pixels, read_nbr)
from .pipeline import AnalysisResult, run_analysis
from .raster import Raster, check_coregistered, read_raster
from .regions import to_region
from .report import build_report
