import re
import datetime
import pystache


def html_template_string(source, data):
    return pystache.render(source, data)


def valid_int(value, default=-1):
    """ Integer from a form value, `default` when it does not parse """
    if isinstance(value, bool): return default
    if isinstance(value, int): return value
    try:
        return int(str(value).strip())
    except ValueError:
        return default


def parse_datetime(value):
    """ Parse "Y-m-d", "Y-m-d H:M[:S]" or "Y-m-dTH:M[:S]", None when invalid """
    if value is None: return None
    value=str(value).strip()
    if not value: return None
    try:
        return datetime.datetime.fromisoformat(value)
    except ValueError:
        return None


def parse_time(value):
    if value is None: return None
    value=str(value).strip()
    if not value: return None
    try:
        return datetime.time.fromisoformat(value)
    except ValueError:
        dt=parse_datetime(value)
        return dt.time() if dt else None


_LINK_RE=re.compile(r"https?://\S+")

def find_link(msg):
    m=_LINK_RE.search(msg)
    return m.group(0) if m else None


def _deepcassign(src : dict, mod : dict):
    if not isinstance(src, dict) or not isinstance(mod, dict):
        return None
    for key in mod:
        if isinstance(mod[key], dict):
            if key in src and isinstance(src[key], dict):
                src[key]=_deepcassign(src[key], mod[key])
            else:
                src[key]=_deepcassign({}, mod[key])
        else:
            src[key]=mod[key]
    return src

def deepassign(src, *args):
    for arg in args:
        src=_deepcassign(src, arg)
    return src
