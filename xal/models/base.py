"""Base model and serialization markers shared by every xAL record.

Fields named ``attr_*`` stand for what the xAL XML schema models as element
attributes and are tagged with ``ATTRIBUTE``. Fields named ``text`` carry the
element's text content and are tagged with ``TEXT``. Every other field is a
nested element.
"""

from pydantic import BaseModel, ConfigDict


ATTRIBUTE = {"is_attribute": True}
TEXT = {"is_text": True}


class XALModel(BaseModel):
    """Common base for the xAL records.

    Every field is optional and defaults to ``None`` so that an unset value
    stays distinguishable from an empty one.
    """

    model_config = ConfigDict(from_attributes=True)
