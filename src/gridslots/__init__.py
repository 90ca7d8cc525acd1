from .config import Config, default_config
from .layout import DuplicateIdentifier, LayoutItem, MalformedItem, as_layout
from .occupancy import Occupancy, build_occupancy, row_count
from .placeholders import (
    get_empty_placeholders,
    pad_layout,
    placeholder_id,
    strip_placeholders,
)
