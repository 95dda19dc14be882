import logging
from typing import Any, Dict, Optional, Type, TypeVar, Union

from pydantic import ValidationError

from xal.core.config import settings
from xal.core.exceptions import AddressDecodeError
from xal.models.address import XAL
from xal.models.base import XALModel


logger = logging.getLogger(__name__)

M = TypeVar("M", bound=XALModel)


class AddressJSONService:
    """Service mapping xAL records to and from JSON.

    Unset fields are omitted from the output at every depth, while empty
    strings and empty lists are written as they are, so that "not asserted"
    and "empty" survive a round trip as different values.
    """

    def __init__(self, indent: Optional[int] = None):
        """Initialize the service.

        Args:
            indent: JSON indentation, defaults to settings.JSON_INDENT
        """
        self.indent = settings.JSON_INDENT if indent is None else indent

    def to_dict(self, record: XALModel) -> Dict[str, Any]:
        """Convert a record to a JSON-compatible dictionary without unset fields."""
        return record.model_dump(mode="json", exclude_none=True)

    def dumps(self, record: XALModel) -> str:
        """Serialize a record to JSON text.

        Args:
            record: Any xAL record, usually the root XAL

        Returns:
            JSON text without the unset fields
        """
        data = record.model_dump_json(exclude_none=True, indent=self.indent or None)
        logger.debug(f"Encoded {type(record).__name__} to {len(data)} characters of JSON")
        return data

    def from_dict(self, data: Dict[str, Any], model: Type[M] = XAL) -> M:
        """Build a record from a dictionary.

        Args:
            data: Decoded JSON object
            model: Record type to build, defaults to the root XAL

        Returns:
            The validated record

        Raises:
            AddressDecodeError: If the data does not fit the record type
        """
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.error(f"Invalid {model.__name__} data: {str(e)}")
            raise AddressDecodeError(model.__name__, e.errors()) from e

    def loads(self, data: Union[str, bytes], model: Type[M] = XAL) -> M:
        """Build a record from JSON text.

        Args:
            data: JSON text
            model: Record type to build, defaults to the root XAL

        Returns:
            The validated record

        Raises:
            AddressDecodeError: If the text is not JSON or does not fit the record type
        """
        try:
            record = model.model_validate_json(data)
        except ValidationError as e:
            logger.error(f"Invalid {model.__name__} JSON: {str(e)}")
            raise AddressDecodeError(model.__name__, e.errors()) from e
        logger.debug(f"Decoded {model.__name__} from JSON")
        return record


json_service = AddressJSONService()
