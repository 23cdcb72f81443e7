"""Runtime settings, read from the environment (and a .env file if present)."""

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, Field


class Settings(BaseModel):
    tool_name: str = "CoilForge Coil Builder"
    profile_name: str = "DAB-CUSTOM"
    profile_filename: str = "arcticfox-profile-dab.cfg"
    max_wraps: int = Field(60, ge=1, description="Wrap search bound")
    supply_voltage: float = Field(7.4, gt=0, description="Default supply voltage (V)")
    safety_limit_amp: float = Field(30.0, gt=0, description="Default current ceiling (A)")


_ENV_VARS = {
    "tool_name": "COILFORGE_TOOL_NAME",
    "profile_name": "COILFORGE_PROFILE_NAME",
    "profile_filename": "COILFORGE_PROFILE_FILENAME",
    "max_wraps": "COILFORGE_MAX_WRAPS",
    "supply_voltage": "COILFORGE_SUPPLY_VOLTAGE",
    "safety_limit_amp": "COILFORGE_SAFETY_LIMIT_AMP",
}


def load_settings() -> Settings:
    """Build Settings from COILFORGE_* environment variables; unset ones keep defaults."""
    load_dotenv()
    values = {}
    for field_name, env_var in _ENV_VARS.items():
        value = os.getenv(env_var)
        if value:
            values[field_name] = value
    return Settings(**values)


@lru_cache
def get_settings() -> Settings:
    return load_settings()
