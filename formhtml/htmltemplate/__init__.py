from .widget import FormBuilder
from .attributes import LabelFlags, normalize
from .naming import resolve_id, resolve_post_name, parse_post_name
from .context import RenderContext
