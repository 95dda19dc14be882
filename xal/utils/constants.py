# Namespace of the OASIS xAL 2.0 XML schema
XAL_NAMESPACE = "urn:oasis:names:tc:ciq:xsdschema:xAL:2.0"

# Prefix marking fields that map to XML attributes
ATTRIBUTE_PREFIX = "attr_"

# Field holding the text content of an element
TEXT_FIELD = "text"
