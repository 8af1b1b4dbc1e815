"""
Attribute sets for form elements.

An attribute set is a plain dict {attribute-name: value}. A few keys have
side effects when elements are built:

    class, style, onchange  merged additively with the include attributes
    id                      element id, see naming.resolve_id()
    prefix, suffix          rendered as <span> markup beside the element

Every helper returns a new dict, callers' dicts are never mutated.
"""

ADDITIVE_KEYS=("class", "style", "onchange")
AFFIX_KEYS=("prefix", "suffix")
DIV_EXCLUDED_KEYS=("onchange", "onkeyup", "onkeydown", "onpaste", "id", "prefix", "suffix", "placeholder")


class LabelFlags:
    """ Decorations requested for the <label> (and tooltip) of a normalized element """

    def __init__(self, required=False, hidden=False, tooltip_class=None):
        self.required=required
        self.hidden=hidden
        self.tooltip_class=tooltip_class

    def merge(self, other):
        self.required=self.required or other.required
        self.hidden=self.hidden or other.hidden
        if other.tooltip_class: self.tooltip_class=other.tooltip_class
        return self

    def label_attributes(self, style=""):
        out=' class="label_required"' if self.required else ""
        if self.hidden: style="display:none;"+style
        if style: out+=' style="%s"' % style
        return out

    def tooltip_attributes(self, *classes):
        names=[x for x in classes if x]
        if self.tooltip_class: names.append(self.tooltip_class)
        out=' class="%s"' % " ".join(names) if names else ""
        if self.hidden: out+=' style="display:none;"'
        return out

    def __bool__(self):
        return bool(self.required or self.hidden or self.tooltip_class)

    def __eq__(self, other):
        if not isinstance(other, LabelFlags): return NotImplemented
        return (self.required, self.hidden, self.tooltip_class)==(other.required, other.hidden, other.tooltip_class)

    def __repr__(self):
        return "LabelFlags(required=%r, hidden=%r, tooltip_class=%r)" % (self.required, self.hidden, self.tooltip_class)


def _copy(attrs):
    return dict(attrs) if attrs else {}

def _str(value):
    return "" if value is None else str(value)


def add_class(class_name, attrs=None):
    out=_copy(attrs)
    if _str(out.get("class")): out["class"]=_str(out["class"])+" "+class_name
    else: out["class"]=class_name
    return out

def remove_class(class_name, attrs=None):
    out=_copy(attrs)
    value=_str(out.get("class"))
    if value==class_name: del out["class"]
    elif class_name in value: out["class"]=" ".join(value.replace(class_name, "").split())
    return out

def add_style(styles, attrs=None):
    out=_copy(attrs)
    if _str(out.get("style")): out["style"]=_str(out["style"])+";"+styles
    else: out["style"]=styles
    return out

def add_min_width_style(value, attrs=None):
    value=_str(value)
    if not value: return _copy(attrs)
    return add_style("min-width:%dch" % len(value), attrs)

def add_onchange(handler, attrs=None):
    out=_copy(attrs)
    if _str(out.get("onchange")): out["onchange"]=_str(out["onchange"])+";"+handler
    else: out["onchange"]=handler
    return out

def clean_div_attributes(attrs=None):
    """ Attributes of the wrapping <div>: the element's own, less handlers and per-element keys """
    return { k: v for k, v in _copy(attrs).items() if k.lower() not in DIV_EXCLUDED_KEYS }


def merge_include(attrs=None, include=None):
    """ Merge the builder-wide include attributes into an element's attributes """
    out=_copy(attrs)
    for key, value in (include or {}).items():
        value=_str(value)
        lkey=key.lower()
        if lkey=="class": out=add_class(value, out)
        elif lkey=="style": out=add_style(value, out)
        elif lkey=="onchange": out=add_onchange(value, out)
        elif value: out[key]=value
    return out


def normalize(attrs=None, include=None):
    """
    Serialize an attribute set to ' key="value"' pairs.

    Include attributes are merged first (see merge_include), keys are sorted
    so the output is reproducible, empty values are dropped. Values are
    written as given, without HTML escaping.

    Returns (attribute string, LabelFlags).
    """
    merged=merge_include(attrs, include)
    flags=LabelFlags()
    out=""
    for key in sorted(merged):
        value=_str(merged[key])
        if not value: continue
        out+=' %s="%s"' % (key, value)
        if key=="class":
            if "required" in value: flags.required=True
            if "MatchCondition" in value: flags.tooltip_class=value
        elif key=="style" and "display:none;" in value:
            flags.hidden=True
    return out, flags


def split_affixes(attrs=None, nbsp=False):
    """
    Pull the prefix/suffix pseudo attributes out of an attribute set.

    Returns (prefix html, suffix html, remaining attributes); the markup is a
    <span> carrying the element's class, rendered beside the element.
    """
    out=_copy(attrs)
    cls=_str(out.get("class"))
    span_attrs=' class="%s"' % cls if cls else ""
    lead="&nbsp;" if nbsp else ""
    html=[]
    for key in AFFIX_KEYS:
        value=_str(out.pop(key, None))
        html.append("<span%s>%s%s</span>" % (span_attrs, lead, value) if value else "")
    return html[0], html[1], out
