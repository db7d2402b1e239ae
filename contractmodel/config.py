"""
Generator settings.

Validated on construction so a bad wait probability fails when the
model is defined rather than halfway through a test run.
"""

from pydantic import BaseModel, Field


class GeneratorSettings(BaseModel):
    """Knobs for action generation shared by every state of a model."""
    wait_probability: float = Field(
        default=0.1, ge=0.0, le=1.0,
        description="Probability of generating a WaitUntil instead of a contract action",
    )
    min_wait_window: int = Field(
        default=10, ge=1,
        description="Lower bound on the upper end of the default wait interval",
    )
    default_size: int = Field(default=20, ge=0, description="Steps per generated sequence")
    max_discards: int = Field(
        default=100, ge=1,
        description="Consecutive inadmissible candidates tolerated before generation stops",
    )

    model_config = {"frozen": True}


DEFAULT_SETTINGS = GeneratorSettings()
