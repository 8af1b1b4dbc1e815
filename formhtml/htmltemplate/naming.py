import re
from ..config import DEFAULT_POST_ARRAY

MULTIPLE_POST_ARRAY="Multiple"
ENCRYPT_POST_ARRAY="Encrypt"
VERIFY_POST_ARRAY="Verify"
OBSOLETE_POST_ARRAY="Obsolete"

_ID_RUN_RE=re.compile(r"[A-Z]+|[0-9]+")


def _underscore_run(m):
    start=m.start()
    if start==0 or m.string[start-1]=="_": return m.group(0)
    return "_"+m.group(0)

def transliterate(field_name):
    """ FirstName -> first_name, Field[0] -> field_0, Address1 -> address_1 """
    name=field_name.replace("'", "").replace(".", "").replace("]", "").replace("[", "_")
    return _ID_RUN_RE.sub(_underscore_run, name).lower()


def resolve_id(field_name, attrs=None):
    """
    Element id for a field: the explicit 'id' attribute when present, else
    the field name transliterated to snake case.

    Returns (id, attributes without 'id').
    """
    attrs=dict(attrs) if attrs else {}
    if "id" in attrs:
        return str(attrs.pop("id")), attrs
    return transliterate(field_name), attrs


def resolve_post_name(field_name, post_array_name):
    """ Name of the field in the submitted form data, nested in the post array """
    if not post_array_name: return field_name
    if "[" in field_name:
        # Tags[] -> Multiple[Tags][], Grid[2][Cell] -> Multiple[Grid][2][Cell]
        prefix=MULTIPLE_POST_ARRAY if post_array_name==DEFAULT_POST_ARRAY else post_array_name
        head, rest=field_name.split("[", 1)
        return "%s[%s][%s" % (prefix, head, rest)
    return "%s[%s]" % (post_array_name, field_name)


_POST_NAME_RE=re.compile(r"^([^\[\]]+)((?:\[[^\[\]]*\])+)$")

def parse_post_name(post_name):
    """
    Split a post name back into (post array, [segments]).

    Multiple[Tags][] -> ("Multiple", ["Tags", ""])
    Plain names without brackets give (None, [name]).
    """
    m=_POST_NAME_RE.match(post_name)
    if not m: return None, [post_name]
    return m.group(1), re.findall(r"\[([^\[\]]*)\]", m.group(2))
