import datetime
from .. import log
from ..config import config, DEFAULT_POST_ARRAY
from ..services import Services
from ..utils import valid_int, parse_datetime, parse_time, find_link
from .attributes import (normalize, merge_include, split_affixes, clean_div_attributes, add_class,
                         remove_class, add_min_width_style)
from .naming import resolve_id, resolve_post_name, transliterate, ENCRYPT_POST_ARRAY
from .context import RenderContext
from .templates import *


def _lines(*parts):
    return "\n".join([x for x in parts if x])

def _pairs(options):
    return options.items() if isinstance(options, dict) else options


class FormBuilder:
    """
    HTML form fragment builder.

    include_attributes: attributes attached to every element (ex: {"readonly": "readonly"})
    post_array_name: post array wrapping element names (ex: name="FieldValues[element-name]")
    add_unique_id: append a unique integer to generated element ids
    services: collaborators of the surrounding application, see formhtml.services

    Unset arguments are read from the configuration.

    Element names are posted as FieldValues[element-name] with the default post
    array; special cases are Multiple[element-name][] for checkboxes and
    multiple selects, Encrypt[element-name] for encrypted fields and the raw
    name for file uploads.

    Element ids are generated from the element name (FirstName -> first_name)
    unless the attributes carry an explicit 'id'.
    """

    FILE_UPLOAD_ARCHIVE="A"
    FILE_UPLOAD_DELETE="D"
    FILE_UPLOAD_NONE=""

    def __init__(self, include_attributes=None, post_array_name=None, add_unique_id=None, services=None):
        if include_attributes is None: include_attributes=config.get("include_attributes", {})
        if not isinstance(include_attributes, dict): raise ValueError("include_attributes must be dict")
        if post_array_name is None: post_array_name=config.get("post_array_name", DEFAULT_POST_ARRAY)
        if add_unique_id is None: add_unique_id=config.get("add_unique_id", True)
        self.include_attributes=dict(include_attributes)
        self.context=RenderContext(post_array_name, bool(add_unique_id))
        self.services=services if services else Services()
        self.is_msp_field=False

    def post_array_name(self):
        return self.context.post_array_name

    def post_array(self, name):
        """ with builder.post_array("Encrypt"): ... names are posted as Encrypt[...] inside the block """
        return self.context.post_array(name)

    # most recent element id generated, for <label for="...">
    def element_unique_id(self):
        return self.context.elem_unique_id

    def set_msp_field(self, toggle):
        self.is_msp_field=bool(toggle)

    # ----------------------------------------------------
    # helpers
    # ----------------------------------------------------

    def _attributes(self, attrs):
        text, flags=normalize(attrs, self.include_attributes)
        self.context.apply(flags)
        return text

    def _post_name(self, name):
        return resolve_post_name(name, self.context.post_array_name)

    def _div_attributes(self, attrs):
        div=clean_div_attributes(attrs)
        if self.is_msp_field: div=add_class("msp_label", div)
        return normalize(div, self.include_attributes)[0]

    def _field_tooltip(self, name):
        html=self.context.tooltips.get(name)
        return self.tooltip(html) if html else ""

    def _label(self, text, tooltip="", style=""):
        return render(LABEL, **{
            "for": self.context.elem_unique_id,
            "attributes": self.context.flags.label_attributes(style),
            "text": text+":" if text else "",
            "tooltip": tooltip
        })

    def _labeled_div(self, div_attributes, label, name, element, before="", always_label=False):
        tooltip=self._field_tooltip(name)
        label_html=self._label(label, tooltip) if (label or always_label) else ""
        self.context.finish_element()
        return render(LABELED_DIV, attributes=div_attributes, body=_lines(before, label_html, element))

    def _date_value(self, value, fmt, name):
        value="" if value is None else str(value)
        if not value or "0000-00-00" in value: return datetime.datetime.now().strftime(fmt)
        dt=parse_datetime(value)
        if dt is None:
            log.w("FormBuilder: invalid date '%s' for field '%s', using today" % (value, name))
            dt=datetime.datetime.now()
        return dt.strftime(fmt)

    # ----------------------------------------------------
    # <input> elements
    # ----------------------------------------------------

    def input(self, input_type, elem_id, name, value, attrs=None, data_list=None, placeholder=None, unique=True):
        if value is None: value=""
        elem_id=self.context.unique_id(elem_id, unique)
        prefix, suffix, attrs=split_affixes(attrs, nbsp=True)
        datalist=""
        if data_list is not None:
            list_id="datalist_"+elem_id
            attrs["list"]=list_id
            datalist=render(DATALIST, id=list_id, options="".join(["<option>%s</option>" % x for x in data_list]))
        return render(INPUT,
            prefix=prefix,
            type=input_type,
            placeholder=attr("placeholder", placeholder),
            id=elem_id,
            name=self._post_name(name),
            value=value,
            attributes=self._attributes(attrs),
            suffix=suffix,
            datalist=datalist)

    def div_input(self, input_type, label, name, value, attrs=None, data_list=None, placeholder=None):
        div_attributes=self._div_attributes(attrs)
        self.context.reset_element()
        elem_id, attrs=resolve_id(name, attrs)
        element=self.input(input_type, elem_id, name, value, attrs, data_list, placeholder)
        return self._labeled_div(div_attributes, label, name, element)

    def div_input_text(self, label, name, value, attrs=None, data_list=None, placeholder=None):
        attrs=add_min_width_style(value, attrs)
        return self.div_input("text", label, name, value, attrs, data_list, placeholder)

    def div_input_number(self, label, name, value, attrs=None):
        if value is None or str(value)=="": value="0"
        return self.div_input("number", label, name, value, attrs)

    # value format: Y-m-d, empty or 0000-00-00 is today
    def div_input_date(self, label, name, value, attrs=None, start_blank=False):
        value=self._date_value(value, "%Y-%m-%d", name)
        attrs=add_class("date", attrs)
        return self.div_input("date", label, name, "" if start_blank else value, attrs)

    def div_input_date_prior(self, label, name, value, attrs=None, start_blank=False):
        value=self._date_value(value, "%Y-%m-%d", name)
        attrs=dict(attrs) if attrs else {}
        attrs["max"]=datetime.date.today().strftime("%Y-%m-%d")
        attrs=add_class("prior_date", attrs)
        return self.div_input("date", label, name, "" if start_blank else value, attrs)

    # value format: Y-m-d H:M:S
    def div_input_datetime(self, label, name, value, attrs=None):
        value=self._date_value(value, "%Y-%m-%dT%H:%M", name)
        attrs=add_class("date", attrs)
        return self.div_input("datetime-local", label, name, value, attrs)

    def div_input_email(self, label, name, value, attrs=None):
        attrs=add_min_width_style(value, attrs)
        attrs=add_class("email", attrs)
        return self.div_input("email", label, name, value, attrs)

    def div_input_password(self, label, name, value, attrs=None):
        attrs=dict(attrs) if attrs else {}
        attrs["autocomplete"]="new-password"
        attrs=add_class("password", attrs)
        return self.div_input_encrypted(label, name, value, attrs)

    def div_input_encrypted(self, label, name, value, attrs=None):
        """
        Encrypted value: posted as Encrypt[field-name], the stored value is
        decrypted for display. Outside of div_input_password() the plain text
        is shown while the input has focus, and a readonly input gets a
        Reveal/Conceal button.
        """
        attrs=dict(attrs) if attrs else {}
        button=""
        if "autocomplete" not in attrs:
            attrs["autocomplete"]="off"
            attrs["onfocus"]="changeEncrypted(this, 'text');"
            attrs["onblur"]="changeEncrypted(this, 'password');"
            merged=merge_include(attrs, self.include_attributes)
            if "readonly" in merged or "readonly" in merged.values():
                button=REVEAL_BUTTON
                attrs["width"]="80%"
                attrs["style"]="display:inline-block"
        if value: value=self.services.decrypt_value(value)
        with self.post_array(ENCRYPT_POST_ARRAY):
            div=self.div_input("password", label, name, value, attrs)
        return _lines(div, button, render(ENCRYPTED_SCRIPT, id=self.element_unique_id()))

    def div_input_rate(self, label, name, value, attrs=None):
        if value is None or str(value)=="": value="0"
        attrs=dict(attrs) if attrs else {}
        attrs["prefix"]="$"
        attrs.update({ "min": "0", "max": "999", "step": "1" })
        return self.div_input("number", label, name, value, attrs)

    def div_input_search(self, label, name, value, attrs=None, data_list=None):
        return self.div_input("search", label, name, value, attrs, data_list)

    def div_input_tel(self, label, name, value, attrs=None):
        attrs=add_class("phone_number", attrs)
        attrs["length"]=12
        return self.div_input("tel", label, name, value, attrs)

    # value format: H:M[:S], empty is now
    def div_input_time(self, label, name, value, attrs=None):
        t=parse_time(value)
        if t is None:
            if value: log.w("FormBuilder: invalid time '%s' for field '%s', using now" % (value, name))
            t=datetime.datetime.now().time()
        attrs=add_class("time", attrs)
        return self.div_input("time", label, name, t.strftime("%H:%M"), attrs)

    def div_input_file(self, label, name, file_id="-1", attrs=None, previous_file_flag="", archive_description=""):
        """
        File upload for screen readers: the <input type="file"> is hidden
        behind a "Choose File" button and a drop target.

        An existing file (file_id > -1) gets View/Download links and a hidden
        field telling the controller what to do with it: PriorFile[name]
        (keep), ArchiveFile[name] or DeleteFile[name] depending on
        previous_file_flag. The 'required' class is dropped when a file
        exists and readonly becomes disabled.
        """
        uid=str(self.context.next_unique())
        file_id="" if file_id is None else str(file_id)
        ifile=valid_int(file_id)
        exists=file_id!="" and ifile>-1
        attrs=merge_include(attrs, self.include_attributes)

        wrapper_class=""
        allow_multiple=False
        file_attrs={ "onchange": "formSelectFile('%s')" % uid, "accept": ".pdf,.jpg,.png" }
        if exists: attrs=remove_class("required", attrs)
        if "required" in str(attrs.get("class", "")): file_attrs["class"]=attrs["class"]
        if "readonly" in attrs:
            file_attrs["disabled"]="disabled"
            del attrs["readonly"]
            wrapper_class=" read_only"
        if "multiple" in attrs:
            allow_multiple=True
            file_attrs["multiple"]=attrs.pop("multiple")
        if "accept" in attrs: file_attrs["accept"]=attrs.pop("accept")

        prefix=attrs.pop("prefix", "")
        suffix=attrs.pop("suffix", "")
        if prefix: prefix=str(prefix)+"&nbsp;\n"
        if suffix: suffix="&nbsp;"+str(suffix)+"\n"

        link=""
        hidden=""
        view=""
        if exists:
            on_click=self.services.on_click_new_window(self.services.display_url(ifile))
            view='<span style="margin:0;">View File: <button type="button" style="margin: 0 0 0 5px;" onclick="%s">View</button></span>\n' % on_click
            link='<span class="download_file">%s</span>' % self.services.file_link(ifile, "Download")
            if previous_file_flag==self.FILE_UPLOAD_DELETE:
                hidden=self.hidden("DeleteFile[%s]" % name, file_id, False)
            elif previous_file_flag==self.FILE_UPLOAD_ARCHIVE:
                hidden=self.hidden("ArchiveFile[%s]" % name, file_id, False)
                if archive_description:
                    hidden=_lines(hidden, self.hidden("ArchiveDesc[%s]" % name, archive_description, False))
            else:
                hidden=self.hidden("PriorFile[%s]" % name, file_id, False)

        tooltip=self._field_tooltip(name)
        label_html="<label>%s:%s%s</label>\n" % (label, link, tooltip) if label else ""
        if allow_multiple: name+="[]"
        return render(FILE_UPLOAD,
            attributes=normalize(clean_div_attributes(attrs))[0],
            view=view,
            label=label_html,
            wrapper_class=wrapper_class,
            uid=uid,
            name=name,
            file_attributes=normalize(file_attrs)[0],
            prefix=prefix,
            suffix=suffix,
            placeholder="Drag files here" if allow_multiple else "Drag 1 file here",
            tooltip=tooltip,
            hidden=hidden)

    # ----------------------------------------------------
    # radio buttons and checkboxes
    # ----------------------------------------------------

    def input_radio(self, label, elem_id, name, value, checked=False, attrs=None):
        elem_id=self.context.unique_id(elem_id)
        return render(RADIO,
            id=elem_id,
            name=self._post_name(name),
            value=value,
            checked=' checked="checked"' if checked else "",
            attributes=self._attributes(attrs),
            label=label)

    def div_radio(self, label, radio_inputs, attrs=None, tooltip=""):
        html=render(FIELDSET_DIV,
            attributes=normalize(add_class("radio_div", attrs), self.include_attributes)[0],
            label=label+":" if label else "",
            tooltip=tooltip,
            inputs="\n".join(radio_inputs))
        self.context.finish_element()
        return html

    def input_checkbox(self, label, elem_id, name, value, checked=False, attrs=None):
        """
        Checkbox posted as Multiple[name][]; selections are stored as a
        comma separated string. The first checkbox of a field name comes with
        a blank hidden field so that the field is cleared when nothing is checked.
        """
        elem_id=self.context.unique_id(elem_id)
        clear=""
        if name not in self.context.cleared_checkboxes:
            self.context.cleared_checkboxes.add(name)
            clear=self.hidden(name+"[]", "")+"\n"
        return render(CHECKBOX,
            clear=clear,
            id=elem_id,
            name=self._post_name(name+"[]"),
            value=value,
            checked=' checked="checked"' if checked else "",
            attributes=self._attributes(attrs),
            width=len(label)+4,
            label=label)

    def div_checkbox(self, label, checkbox_inputs, attrs=None, tooltip=""):
        html=render(FIELDSET_DIV,
            attributes=normalize(add_class("checkbox_div", attrs), self.include_attributes)[0],
            label=label+":" if label else "",
            tooltip=tooltip,
            inputs="\n".join(checkbox_inputs))
        self.context.finish_element()
        return html

    # ----------------------------------------------------
    # <select> elements
    # ----------------------------------------------------

    def select(self, elem_id, name, select_value, options, attrs=None, unique=True):
        """
        options: {value: prompt} or a sequence of (value, prompt) pairs.
        A multiple select takes the selected values as a list or a comma
        separated string and is posted as Multiple[name][].
        """
        elem_id=self.context.unique_id(elem_id, unique)
        attrs=dict(attrs) if attrs else {}
        multiple="multiple" in attrs
        if multiple and select_value is not None and not isinstance(select_value, (list, tuple, set)):
            select_value=str(select_value).split(",")
        if select_value is None:
            selected=set()
        elif isinstance(select_value, (list, tuple, set)):
            selected=set([str(x) for x in select_value])
        else:
            selected=set([str(select_value)])

        html=""
        for value, prompt in _pairs(options):
            html+=render(OPTION, value=value, selected=' selected="selected"' if str(value) in selected else "", prompt=prompt)

        prefix, suffix, attrs=split_affixes(attrs)
        if multiple: name+="[]"
        return render(SELECT,
            prefix=prefix,
            id=elem_id,
            name=self._post_name(name),
            attributes=self._attributes(attrs),
            options=html,
            suffix=suffix)

    # rows: sequence of mappings (database rows)
    def select_db_rows(self, elem_id, name, rows, key_field, value_field, select_value, attrs=None):
        options=dict([(row[key_field], row[value_field]) for row in rows])
        return self.select(elem_id, name, select_value, options, attrs)

    def div_select(self, label, name, select_value, options, attrs=None):
        div_attributes=self._div_attributes(attrs)
        self.context.reset_element()
        elem_id, attrs=resolve_id(name, attrs)
        element=self.select(elem_id, name, select_value, options, attrs)
        clear=self.hidden(name+"[]", "") if "multiple" in attrs else ""
        return self._labeled_div(div_attributes, label, name, element, before=clear, always_label=True)

    def div_select_db_rows(self, label, name, rows, key_field, value_field, select_value, attrs=None, options=None):
        options=dict(_pairs(options)) if options else {}
        for row in rows:
            options[row[key_field]]=row[value_field]
        return self.div_select(label, name, select_value, options, attrs)

    # ----------------------------------------------------
    # text elements
    # ----------------------------------------------------

    # <h1>...<h6> (or any tag), the tag name is also the id base
    def header(self, tag, value, attrs=None):
        elem_id=self.context.unique_id(tag)
        prefix, suffix, attrs=split_affixes(attrs)
        return render(HEADER, prefix=prefix, tag=tag, id=elem_id, attributes=self._attributes(attrs), value=value, suffix=suffix)

    def text_area(self, elem_id, name, value, attrs=None, placeholder=None):
        if value is None: value=""
        elem_id=self.context.unique_id(elem_id)
        prefix, suffix, attrs=split_affixes(attrs)
        return render(TEXTAREA,
            prefix=prefix,
            id=elem_id,
            placeholder=attr("placeholder", placeholder),
            name=self._post_name(name),
            attributes=self._attributes(attrs),
            events="",
            value=value,
            suffix=suffix)

    def text_display(self, elem_id, label, value, attrs=None):
        if not value: return ""
        elem_id=self.context.unique_id(elem_id)
        prefix, suffix, attrs=split_affixes(attrs)
        return render(TEXT_DISPLAY, prefix=prefix, id=elem_id, attributes=self._attributes(attrs), label=label, value=value, suffix=suffix)

    def div_text_area(self, label, name, value, attrs=None, placeholder=None):
        div_attributes=self._div_attributes(attrs)
        self.context.reset_element()
        elem_id, attrs=resolve_id(name, attrs)
        element=self.text_area(elem_id, name, value, attrs, placeholder)
        return self._labeled_div(div_attributes, label, name, element, always_label=True)

    # notes are never readonly, saved on blur through autoUpdate()
    def div_text_area_note(self, label, name, value, attrs=None, form_id="generic_form_1"):
        attrs=dict(attrs) if attrs else {}
        attrs.pop("disabled", None)
        attrs.pop("readonly", None)
        div_attributes=self._div_attributes(attrs)
        self.context.reset_element()
        elem_id, attrs=resolve_id(name, attrs)
        elem_id=self.context.unique_id(elem_id)
        prefix, suffix, attrs=split_affixes(attrs)
        element=render(TEXTAREA,
            prefix=prefix,
            id=elem_id,
            placeholder="",
            name=self._post_name(name),
            attributes=self._attributes(attrs),
            events=" onBlur=\"autoUpdate('%s');\"" % form_id,
            value=value,
            suffix=suffix)
        label_html=self._label(label, self._field_tooltip(name), "float:left;width: 30px;")
        self.context.finish_element()
        return render(LABELED_DIV, attributes=div_attributes, body=_lines(label_html, element))

    def div_message(self, label, message, tooltip=""):
        return render(MESSAGE_DIV, label=label, tooltip=tooltip, message=message)

    def div_message_tight(self, label, message):
        return render(MESSAGE_DIV_TIGHT, label=label, message=message)

    def inline_message(self, label, message):
        return render(INLINE_MESSAGE, label=label, message=message)

    def hidden(self, name, value, use_post_array=True):
        elem_id="%s_%d" % (transliterate(name), self.context.next_unique())
        return render(HIDDEN, id=elem_id, name=self._post_name(name) if use_post_array else name, value=value)

    def ul(self, items, attrs=None):
        prefix, suffix, attrs=split_affixes(attrs)
        return render(UL,
            attributes=self._attributes(attrs),
            items="".join([render(LI, prefix=prefix, item=x, suffix=suffix) for x in items]))

    def span_more(self, content, length):
        """ Content cut near `length` characters with (More...)/(Less) toggles """
        if len(content)<length: return content
        uid=self.context.next_unique()
        shown=content[:length]
        pos=shown.find(" ", max(len(shown)-15, 0))
        if pos<0: pos=length
        return render(SPAN_MORE,
            shown=content[:pos],
            hidden=content[pos:],
            less_id="less_%d" % uid,
            more_id="more_%d" % uid)

    def div_link(self, label, title, url, attrs=None):
        return self._link_div(label, title, 'href="%s"' % url, attrs)

    def div_on_click(self, label, title, handler, attrs=None):
        return self._link_div(label, title, 'onclick="%s"' % handler, attrs)

    def _link_div(self, label, title, target, attrs):
        prefix, suffix, attrs=split_affixes(attrs)
        return render(LINK_DIV,
            attributes=self._attributes(attrs),
            label=render(LINK_LABEL, label=label) if label else "",
            prefix=prefix,
            target=target,
            title=title,
            suffix=suffix)

    @staticmethod
    def controller_msgs(success=None, error=None):
        out=""
        if success: out+=render(CONTROLLER_MSG, **{"class": "success", "message": success})
        if error: out+=render(CONTROLLER_MSG, **{"class": "error", "message": error})
        return out

    @staticmethod
    def add_link(message, blank_target=False):
        """ Wrap the first http(s) url of a message in an <a> tag """
        url=find_link(message)
        if not url: return message
        return message.replace(url, render(HYPERLINK, url=url, target=' target="_BLANK"' if blank_target else ""))

    # ----------------------------------------------------
    # composite fields
    # ----------------------------------------------------

    def _composite(self, method, field_values, expected):
        if len(field_values) not in expected:
            log.w("FormBuilder: invalid field values for %s(): expected %s fields, received %d" % (
                method, " or ".join([str(x) for x in expected]), len(field_values)))
            return None
        return list(field_values.keys()), list(field_values.values())

    def div_name(self, field_values, attrs=None):
        """
        field_values: {first-name-field: value, [middle-name-field: value,] last-name-field: value}
        """
        fields=self._composite("div_name", field_values, (2, 3))
        if not fields: return ""
        names, values=fields
        uid=self.context.next_unique()
        attrs=dict(attrs) if attrs else {}
        self.context.reset_element()
        label_attributes=normalize(attrs, self.include_attributes)[1].label_attributes()

        def name_input(index, id_base, prompt, input_attrs):
            input_attrs=dict(input_attrs, placeholder=prompt)
            input_attrs["aria-label"]=prompt
            return self.input("text", "%s_%d" % (id_base, uid), names[index], values[index], input_attrs, unique=False)

        elements=[name_input(0, "first_name", "First Name", attrs)]
        if len(names)==3:
            middle_attrs=dict(attrs)
            if middle_attrs.get("class")=="required": del middle_attrs["class"]
            elements.append(name_input(1, "middle_name", "Middle Name", middle_attrs))
            label="First, Middle, Last Name"
        else:
            label="First, Last Name"
        elements.append(name_input(len(names)-1, "last_name", "Last Name", attrs))
        self.context.finish_element()
        return render(COMPOSITE_DIV, **{
            "class": "user_name",
            "for": ' for="first_name_%d"' % uid,
            "label_attributes": label_attributes,
            "label": label,
            "elements": "\n".join(elements)
        })

    def div_city_state_zip(self, field_values, attrs=None):
        """
        field_values: {city-field: city, state-field: state, [zip-code-field: zip-code]}
        An empty state defaults to the current user's state.
        """
        fields=self._composite("div_city_state_zip", field_values, (2, 3))
        if not fields: return ""
        names, values=fields
        uid=self.context.next_unique()
        attrs=dict(attrs) if attrs else {}
        if str(values[1]) in ("", "-1"): values[1]=self.services.user_state()
        self.context.reset_element()
        label_attributes=normalize(attrs, self.include_attributes)[1].label_attributes()

        city_attrs=add_min_width_style(values[0], attrs)
        city_attrs.update({ "placeholder": "City", "aria-label": "City" })
        elements=[
            self.input("text", "city_%d" % uid, names[0], values[0], city_attrs, unique=False),
            self.select("state_%d" % uid, names[1], values[1], self.services.state_options(), dict(attrs, **{"aria-label": "State"}), unique=False)
        ]
        label="City, State"
        if len(names)==3:
            label+=", Zip Code"
            zip_attrs=dict(attrs, placeholder="Zip Code")
            zip_attrs["aria-label"]="Zip Code"
            elements.append(self.input("text", "zip_code_%d" % uid, names[2], values[2], zip_attrs, unique=False))
        self.context.finish_element()
        return render(COMPOSITE_DIV, **{
            "class": "user_city_state_zip",
            "for": ' for="city_%d"' % uid,
            "label_attributes": label_attributes,
            "label": label,
            "elements": "\n".join(elements)
        })

    def div_phone(self, label, field_values, attrs=None, tooltip_message=""):
        """
        field_values: {description-field: description, phone-number-field: number, phone-ext-field: extension}
        """
        fields=self._composite("div_phone", field_values, (3,))
        if not fields: return ""
        names, values=fields
        uid=self.context.next_unique()
        attrs=dict(attrs) if attrs else {}
        self.context.reset_element()
        label_attributes=normalize(attrs, self.include_attributes)[1].label_attributes()

        phone_attrs=add_class("phone_number", dict(attrs, placeholder="555-555-1212"))
        phone_attrs["maxlength"]=12
        ext_attrs={ "placeholder": "Ext.", "aria-label": "Phone extension" }
        elements=[
            self.select("phone_desc_%d" % uid, names[0], values[0], self.services.phone_options(), dict(attrs, **{"aria-label": "Phone Description"}), unique=False),
            self.input("text", "phone_no_%d" % uid, names[1], values[1], phone_attrs, unique=False),
            self.input("text", "phone_ext_%d" % uid, names[2], values[2], ext_attrs, unique=False)
        ]
        tooltip=self.tooltip(tooltip_message)
        if tooltip: elements.append(tooltip)
        self.context.finish_element()
        return render(COMPOSITE_DIV, **{
            "class": "user_phone",
            "for": ' for="phone_no_%d"' % uid,
            "label_attributes": label_attributes,
            "label": label,
            "elements": "\n".join(elements)
        })

    # ----------------------------------------------------
    # buttons
    # ----------------------------------------------------

    def _button(self, type, name, value, text, attributes="", id="", cls="", extra=""):
        return render(BUTTON, **{
            "type": type,
            "id": attr("id", id),
            "class": attr("class", cls),
            "name": name,
            "value": value,
            "extra": extra,
            "attributes": attributes,
            "text": text
        })

    def _debug_submit(self, value, text, attributes):
        if not config.get("ajax.debug_submit", False): return ""
        return self._button("submit", "PostButton", value, "Submit "+text, attributes)

    # containers: element replaced by the ajax response, 'PARENT' is the form's parent
    def nav_ajax_button(self, text, form_id, attrs=None, container_id="PARENT"):
        attributes=self._attributes(attrs)
        on_click=' onclick="formSubmit(this, \'%s\', \'%s\');"' % (form_id, container_id)
        return render(NAV_DIV, buttons=_lines(
            self._button("button", "AjaxSave", "AjaxSave", text, attributes, extra=on_click),
            self._debug_submit("AjaxSave", text, attributes)))

    def ajax_button(self, name, text, form_id, attrs=None, container_id="PARENT"):
        attributes=self._attributes(attrs)
        on_click=' onclick="formSubmit(this, \'%s\', \'%s\');"' % (form_id, container_id)
        return _lines(
            self._button("button", name, name, text, attributes, extra=on_click),
            self._debug_submit(name, text, attributes))

    # save a new record from a non-popup form page
    def form_submit_new_self(self, name, text, attrs=None):
        return self._button("submit", "PostButton", name, text, self._attributes(attrs))

    def _ajax_page_id(self, name, text):
        ident=text.replace(" ", "").replace('"', "").replace("/", "")
        return "AjaxButton%s%s%d" % (ident, name, self.context.next_unique())

    def ajax_form_page(self, name, text, on_click_handler):
        extra=' aria-expanded="false" aria-controls="generic_popup_form" onclick="%s"' % on_click_handler
        return self._button("button", name, name, text, id=self._ajax_page_id(name, text), extra=extra)

    def ajax_form_page_db_field(self, name, text, on_click_handler, title=""):
        extra=' title="%s" aria-expanded="false" aria-controls="generic_popup_form" onclick="%s"' % (title, on_click_handler)
        return self._button("button", name, name, text, id=self._ajax_page_id(name, text), cls="subtleLink", extra=extra)

    # save a new record from a popup form to another url
    def form_submit_new_destination(self, text, form_id, target_url, attrs=None):
        extra=' onclick="formSubmitNew(this, \'%s\', \'%s\');"' % (form_id, target_url)
        return self._button("button", "AjaxSave", "AjaxSave", text, self._attributes(attrs), extra=extra)

    def form_submit_delete(self, text, form_id, target_url, attrs=None):
        extra=' onclick="formSubmitDelete(this, \'%s\', \'%s\');"' % (form_id, target_url)
        return self._button("button", "AjaxDelete", "AjaxDelete", text, self._attributes(attrs), extra=extra)

    def form_close(self, text="Close", attrs=None):
        return self._button("button", "Close", "Close", text, self._attributes(add_class("close", attrs)), extra=' onclick="formClose();"')

    # ----------------------------------------------------
    # tooltips
    # ----------------------------------------------------

    # tooltip shown in the <label> of the element named `name`
    def add_tooltip(self, name, html):
        self.context.tooltips[name]=html

    def tooltip_warning(self, message, char="!"):
        return self.tooltip(message, char, warning=True)

    def tooltip(self, message, char="?", warning=False, add_class=""):
        if not message: return ""
        n=self.context.next_tooltip()
        tip_id="tip_%d" % n
        limit=400
        if ") AND (" in message:
            message=message.replace(") AND (", ") AND<br /> (")
            limit=600
        attributes=self.context.flags.tooltip_attributes("tooltip-wrap Warning" if warning else "tooltip-wrap", add_class)
        return render(TOOLTIP,
            script=TOOLTIP_SCRIPT if n==1 else "",
            attributes=attributes,
            char=char,
            id=tip_id,
            width=min(len(message)*16, limit),
            message=message)
