"""
esmapping configuration

We read configuration from 2 sources, in order of precedence (higher is more priority)
- Environment variables
- A .env file, either in the current working directory or in a location specified
  by the ESMAPPING_ENV_FILE environment variable
"""

import functools
from pathlib import Path
from typing import Annotated

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "esmapping_"


class Settings(BaseSettings):
    env_file: Annotated[
        Path,
        Field(
            description="Location of a .env file (if used) relative to working directory",
        ),
    ] = Path(".env")

    number_of_shards: Annotated[
        int | None,
        Field(
            ge=1,
            description="Default number of shards for generated index settings (None: leave it to elastic)",
        ),
    ] = None

    number_of_replicas: Annotated[
        int | None,
        Field(
            ge=0,
            description="Default number of replicas for generated index settings (None: leave it to elastic)",
        ),
    ] = None

    allow_name_collisions: Annotated[
        bool,
        Field(
            description=(
                "If two fields of a record (e.g. a field and a field of an embedded record) have the same name, "
                "keep the last one. If false, this is an error"
            ),
        ),
    ] = True

    json_indent: Annotated[int, Field(ge=0, description="Indentation of the JSON printed by the command line")] = 2

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX)


@functools.lru_cache()
def get_settings() -> Settings:
    # Read the env file location first, so the .env file can be loaded before the real settings
    temp = Settings()
    load_dotenv(temp.env_file, override=False)
    return Settings()


if __name__ == "__main__":
    # Echo the settings
    for k, v in get_settings().model_dump().items():
        print(f"{ENV_PREFIX.upper()}{k.upper()}={v}")
