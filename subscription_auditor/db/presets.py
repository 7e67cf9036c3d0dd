import json
import logging
from importlib import resources
from pathlib import Path
from typing import Iterable, List, Optional

from subscription_auditor.models.subscription import Preset

logger = logging.getLogger(__name__)

BUNDLED_PRESETS = "presets.json"


def load_presets(path: Optional[str | Path] = None) -> List[Preset]:
    """
    Load the preset catalog.

    With no path the bundled catalog is used. A configured path that does not
    exist yields an empty catalog rather than an error, matching how optional
    config files are treated elsewhere.
    """
    if path:
        preset_file = Path(path)
        if not preset_file.exists():
            logger.warning(f"Preset catalog {preset_file} not found, using empty catalog")
            return []
        with preset_file.open(encoding="utf-8") as fp:
            raw = json.load(fp)
    else:
        source = resources.files("subscription_auditor.data").joinpath(BUNDLED_PRESETS)
        with source.open(encoding="utf-8") as fp:
            raw = json.load(fp)

    presets = [Preset.model_validate(item) for item in raw]
    logger.debug(f"Loaded {len(presets)} presets")
    return presets


def filter_presets(
    presets: Iterable[Preset],
    query: str = "",
    exclude_names: Iterable[str] = (),
) -> List[Preset]:
    """Case-insensitive name search that hides presets already in the ledger."""
    needle = (query or "").strip().lower()
    taken = set(exclude_names)
    return [
        preset
        for preset in presets
        if needle in preset.name.lower() and preset.name not in taken
    ]
