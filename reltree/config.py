"""Default values shared by the deserializer and the renderers."""

DEFAULT_COLOR = "lightblue"
DEFAULT_SHAPE = "ellipse"

# Upper bound on attachment passes over the relation list.
MAX_ITERATIONS = 10000
