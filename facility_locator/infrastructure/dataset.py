"""
Static location dataset used to seed the road network.

Two sources
-----------
* **Built-in** -- the 13 districts of Uttarakhand as hubs, each with five
  government service centers placed at small fixed offsets around the
  district headquarters.
* **JSON file** -- ``settings.dataset_path``; same shape as
  ``NetworkDataset``::

      {
        "proximity_threshold_km": 100,
        "hubs": [{"name": "Almora", "latitude": 29.5973, "longitude": 79.6609}],
        "facilities": [{"name": "...", "hub": "Almora", "latitude": ..., "longitude": ...}],
        "facility_templates": [{"name": "Seed Testing Lab", "lat_offset": 0.03,
                                "lng_offset": 0.01, "address": "Seed Research Center"}]
      }

  Explicit ``facilities`` and template-generated ones are both attached.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from facility_locator.domain.graph import RoadNetwork
from facility_locator.domain.network_builder import (
    DEFAULT_PROXIMITY_THRESHOLD_KM,
    FacilitySpec,
    FacilityTemplate,
    HubSpec,
    build_network,
    expand_templates,
)

logger = logging.getLogger(__name__)


class NetworkDataset(BaseModel):
    hubs: list[HubSpec]
    facilities: list[FacilitySpec] = []
    facility_templates: list[FacilityTemplate] = []
    proximity_threshold_km: Optional[float] = Field(None, gt=0)

    def all_facilities(self) -> list[FacilitySpec]:
        return list(self.facilities) + expand_templates(
            self.hubs, self.facility_templates
        )

    def build(self, default_threshold_km: float = DEFAULT_PROXIMITY_THRESHOLD_KM) -> RoadNetwork:
        threshold = (
            self.proximity_threshold_km
            if self.proximity_threshold_km is not None
            else default_threshold_km
        )
        return build_network(self.hubs, self.all_facilities(), threshold)


# ── Built-in data ─────────────────────────────────────────────────────

HELPLINE = "1800-XXX-XXXX"

DISTRICT_HUBS: list[HubSpec] = [
    HubSpec("Almora", 29.5973, 79.6609, address="Almora City"),
    HubSpec("Bageshwar", 29.8367, 79.7696, address="Bageshwar City"),
    HubSpec("Chamoli", 30.4030, 79.3207, address="Chamoli City"),
    HubSpec("Champawat", 29.3355, 80.0784, address="Champawat City"),
    HubSpec("Dehradun", 30.3165, 78.0322, address="Dehradun City"),
    HubSpec("Haridwar", 29.9457, 78.1642, address="Haridwar City"),
    HubSpec("Nainital", 29.3919, 79.4542, address="Nainital City"),
    HubSpec("Pauri Garhwal", 30.0856, 78.7776, address="Pauri City"),
    HubSpec("Pithoragarh", 29.5820, 80.2185, address="Pithoragarh City"),
    HubSpec("Rudraprayag", 30.2847, 78.9839, address="Rudraprayag City"),
    HubSpec("Tehri Garhwal", 30.3833, 78.4800, address="Tehri City"),
    HubSpec("Udham Singh Nagar", 29.0274, 79.5280, address="USN City"),
    HubSpec("Uttarkashi", 30.7292, 78.4439, address="Uttarkashi City"),
]

GOVERNMENT_CENTERS: list[FacilityTemplate] = [
    FacilityTemplate(
        "Krishi Vigyan Kendra", 0.01, 0.01, "Main Road",
        HELPLINE, "Crop Research, Training, Soil Testing",
    ),
    FacilityTemplate(
        "Agriculture Department", -0.01, -0.01, "Government Complex",
        HELPLINE, "Subsidies, Schemes, Technical Support",
    ),
    FacilityTemplate(
        "Soil Testing Lab", 0.02, -0.02, "Research Complex",
        HELPLINE, "Soil Analysis, Fertilizer Recommendations",
    ),
    FacilityTemplate(
        "Horticulture Department", -0.02, 0.02, "Horticulture Complex",
        HELPLINE, "Fruit/Vegetable Cultivation, Plant Protection",
    ),
    FacilityTemplate(
        "Seed Testing Lab", 0.03, 0.01, "Seed Research Center",
        HELPLINE, "Seed Quality Testing, Certification",
    ),
]


def default_dataset() -> NetworkDataset:
    return NetworkDataset(hubs=DISTRICT_HUBS, facility_templates=GOVERNMENT_CENTERS)


def load_dataset(path: Optional[str | Path] = None) -> NetworkDataset:
    """Read a JSON dataset from *path*, or return the built-in one.

    Raises ``pydantic.ValidationError`` on a malformed file and
    ``FileNotFoundError`` if *path* does not exist.
    """
    if path is None:
        return default_dataset()
    raw = Path(path).read_text(encoding="utf-8")
    dataset = NetworkDataset.model_validate_json(raw)
    logger.info("Loaded dataset from %s (%d hubs)", path, len(dataset.hubs))
    return dataset
