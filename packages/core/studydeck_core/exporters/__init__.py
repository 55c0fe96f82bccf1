"""Export formats for card decks."""

from studydeck_core.exporters.apkg import export_apkg
from studydeck_core.exporters.dataset import (
    DatasetFormatError,
    export_dataset,
    export_json,
    load_dataset,
)
from studydeck_core.exporters.tsv import export_tsv

__all__ = [
    "export_dataset",
    "export_json",
    "load_dataset",
    "DatasetFormatError",
    "export_tsv",
    "export_apkg",
]
