import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from xal.core.config import settings
from xal.core.logging import setup_logging
from xal.models.address import XAL

logger = logging.getLogger(__name__)


def generate_schema(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """Write the JSON schema of the XAL root record as YAML.

    Args:
        path: Destination file, defaults to settings.SCHEMA_OUTPUT_PATH

    Returns:
        The schema that was written
    """
    path = Path(path or settings.SCHEMA_OUTPUT_PATH)
    schema = XAL.model_json_schema()
    schema["x-xal-version"] = settings.XAL_VERSION

    with open(path, "w") as f:
        yaml.dump(schema, f, default_flow_style=False)

    logger.info(f"Wrote {settings.PROJECT_NAME} schema to {path}")
    return schema


if __name__ == "__main__":
    setup_logging()
    generate_schema()
