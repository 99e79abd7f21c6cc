"""
Layout configuration.

Every option can be given directly, or read from SCHEMA_DIAGRAM_<FIELD>
environment variables with LayoutConfig.from_env().
"""

import os
from typing import Optional

from pydantic import BaseModel, Field

from .models import DEFAULT_CANVAS_HEIGHT, DEFAULT_CANVAS_WIDTH, Canvas


ENV_PREFIX = "SCHEMA_DIAGRAM_"

# Default layout parameters
DEFAULT_ITERATIONS = 100
DEFAULT_MIN_DISTANCE = 0.1


class LayoutConfig(BaseModel):
    """Options consumed by the layout driver and force simulation."""
    iterations: int = Field(default=DEFAULT_ITERATIONS, gt=0)
    canvas_width: float = Field(default=DEFAULT_CANVAS_WIDTH, gt=0)
    canvas_height: float = Field(default=DEFAULT_CANVAS_HEIGHT, gt=0)
    min_distance: float = Field(default=DEFAULT_MIN_DISTANCE, gt=0)
    seed: Optional[int] = None
    # Extensions
    ideal_edge_length: Optional[float] = Field(default=None, gt=0)  # Overrides sqrt(area / N)
    initial_temperature: Optional[float] = Field(default=None, gt=0)  # Defaults to max(canvas) / 10
    tolerance: Optional[float] = Field(default=None, gt=0)  # Early exit below this displacement

    @property
    def canvas(self) -> Canvas:
        return Canvas(width=self.canvas_width, height=self.canvas_height)

    def start_temperature(self) -> float:
        if self.initial_temperature is not None:
            return self.initial_temperature
        return max(self.canvas_width, self.canvas_height) / 10

    @classmethod
    def from_env(cls, environ: Optional[dict] = None, **overrides) -> "LayoutConfig":
        """
        Build a config from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)
            **overrides: Explicit values that win over the environment

        Returns:
            A validated LayoutConfig
        """
        environ = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            raw = environ.get(f"{ENV_PREFIX}{name.upper()}")
            if raw not in (None, ""):
                values[name] = raw
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
