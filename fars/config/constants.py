"""
Configuration constants for the FARS Toolbox.

All column names, file-name patterns, sentinels and lookup tables used
across the toolbox are centralised here so that upstream schema changes
need only one edit.
"""

# ═══════════════════════════════════════════════════════════════════════════════
# Column names — accident file
# ═══════════════════════════════════════════════════════════════════════════════

COL_MONTH = "MONTH"
COL_STATE = "STATE"
COL_LONGITUDE = "LONGITUD"   # NB: truncated spelling is in the original data
COL_LATITUDE = "LATITUDE"

# Synthetic column added when several years are stacked together
COL_YEAR = "year"

REQUIRED_COLUMNS: tuple[str, ...] = (
    COL_MONTH,
    COL_STATE,
    COL_LONGITUDE,
    COL_LATITUDE,
)

# Projection kept by the multi-year reader
YEAR_PROJECTION: list[str] = [COL_MONTH, COL_YEAR]

# ═══════════════════════════════════════════════════════════════════════════════
# File naming
# ═══════════════════════════════════════════════════════════════════════════════

FILENAME_TEMPLATE = "accident_%d.csv.bz2"
FILENAME_GLOB = "accident_*.csv.bz2"
FILENAME_PATTERN = r"^accident_(\d{4})\.csv\.bz2$"

# ═══════════════════════════════════════════════════════════════════════════════
# Sentinel values
# ═══════════════════════════════════════════════════════════════════════════════

# FARS encodes "unknown" coordinates as out-of-range values (e.g. 999.9999,
# 99.9999).  Anything above these thresholds is treated as missing.
LONGITUDE_SENTINEL = 900
LATITUDE_SENTINEL = 90

# ═══════════════════════════════════════════════════════════════════════════════
# Map rendering
# ═══════════════════════════════════════════════════════════════════════════════

MARKER = "."
MARKER_SIZE = 1
MARKER_COLOR = "black"
BOUNDARY_COLOR = "grey"
BOUNDARY_LINEWIDTH = 0.5

# Pad (degrees) applied to an axis whose data range has zero width
DEGENERATE_RANGE_PAD = 0.5

MAP_CRS = "EPSG:4326"

NO_ACCIDENTS_MESSAGE = "no accidents to plot"

# ═══════════════════════════════════════════════════════════════════════════════
# STATE codes (FIPS) → state names
# ═══════════════════════════════════════════════════════════════════════════════

STATE_NAMES: dict[int, str] = {
    1: "Alabama",
    2: "Alaska",
    4: "Arizona",
    5: "Arkansas",
    6: "California",
    8: "Colorado",
    9: "Connecticut",
    10: "Delaware",
    11: "District of Columbia",
    12: "Florida",
    13: "Georgia",
    15: "Hawaii",
    16: "Idaho",
    17: "Illinois",
    18: "Indiana",
    19: "Iowa",
    20: "Kansas",
    21: "Kentucky",
    22: "Louisiana",
    23: "Maine",
    24: "Maryland",
    25: "Massachusetts",
    26: "Michigan",
    27: "Minnesota",
    28: "Mississippi",
    29: "Missouri",
    30: "Montana",
    31: "Nebraska",
    32: "Nevada",
    33: "New Hampshire",
    34: "New Jersey",
    35: "New Mexico",
    36: "New York",
    37: "North Carolina",
    38: "North Dakota",
    39: "Ohio",
    40: "Oklahoma",
    41: "Oregon",
    42: "Pennsylvania",
    43: "Puerto Rico",
    44: "Rhode Island",
    45: "South Carolina",
    46: "South Dakota",
    47: "Tennessee",
    48: "Texas",
    49: "Utah",
    50: "Vermont",
    51: "Virginia",
    52: "Virgin Islands",
    53: "Washington",
    54: "West Virginia",
    55: "Wisconsin",
    56: "Wyoming",
}

# ═══════════════════════════════════════════════════════════════════════════════
# Default encoding used for CSV exports
# ═══════════════════════════════════════════════════════════════════════════════

CSV_ENCODING = "utf-8"
