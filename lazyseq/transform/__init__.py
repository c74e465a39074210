from .concat import concat, concat2
from .effects import tap, tap2
from .map import fmap, fmap2, fmap_in, fmap_out
from .pairs import keys, swap, values
from .resize import resize, resize2
from .select import select, select2, select_map, select_map2, select_map_in, select_map_out
from .skip import skip, skip2

__all__ = (
    # Seq
    "concat",
    "fmap",
    "fmap_out",
    "resize",
    "select",
    "select_map",
    "select_map_out",
    "skip",
    "tap",
    # Seq2
    "concat2",
    "fmap2",
    "fmap_in",
    "keys",
    "resize2",
    "select2",
    "select_map2",
    "select_map_in",
    "skip2",
    "swap",
    "tap2",
    "values",
)
