__version__="1.0.0"

from .htmltemplate import FormBuilder, LabelFlags, RenderContext, normalize, resolve_id, resolve_post_name, parse_post_name
from .services import Services
