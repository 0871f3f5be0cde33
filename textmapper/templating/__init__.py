from textmapper.templating.placeholder_template import PlaceholderTemplate, placeholder
from textmapper.templating.synthesizer import TemplateSynthesizer

__all__ = [
    "PlaceholderTemplate",
    "TemplateSynthesizer",
    "placeholder",
]
