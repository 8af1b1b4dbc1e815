"""
Mustache templates of every fragment the form builder produces.

Templates only interpolate plain variables with triple braces: values are
inserted as given (escaping is up to the caller) and every optional part is
prepared by the builder as a ready-made string, possibly empty.
"""
from ..utils import html_template_string

INPUT='{{{prefix}}}<input type="{{{type}}}"{{{placeholder}}} id="{{{id}}}" name="{{{name}}}" value="{{{value}}}"{{{attributes}}} />{{{suffix}}}{{{datalist}}}'

DATALIST='\n<datalist id="{{{id}}}">{{{options}}}</datalist>'

LABEL='<label for="{{{for}}}"{{{attributes}}}>{{{text}}}{{{tooltip}}}</label>'

LABELED_DIV='<div{{{attributes}}}>\n{{{body}}}\n</div>'

SELECT='{{{prefix}}}<select id="{{{id}}}" name="{{{name}}}"{{{attributes}}}>{{{options}}}</select>{{{suffix}}}'

OPTION='<option value="{{{value}}}"{{{selected}}}>{{{prompt}}}</option>'

TEXTAREA='{{{prefix}}}<textarea id="{{{id}}}"{{{placeholder}}} name="{{{name}}}"{{{attributes}}}{{{events}}}>{{{value}}}</textarea>{{{suffix}}}'

TEXT_DISPLAY='{{{prefix}}}<div id="{{{id}}}" name="Text"{{{attributes}}}><label style="font-weight:bold">{{{label}}}:</label>{{{value}}}</div>{{{suffix}}}'

HEADER='{{{prefix}}}<{{{tag}}} id="{{{id}}}"{{{attributes}}}>{{{value}}}</{{{tag}}}>{{{suffix}}}'

HIDDEN='<input type="hidden" id="{{{id}}}" name="{{{name}}}" value="{{{value}}}" />'

RADIO='<input type="radio" id="{{{id}}}" name="{{{name}}}" value="{{{value}}}"{{{checked}}}{{{attributes}}} />\n<label for="{{{id}}}">{{{label}}}</label>'

CHECKBOX='{{{clear}}}<input type="checkbox" id="{{{id}}}" name="{{{name}}}" value="{{{value}}}"{{{checked}}}{{{attributes}}} />\n<label for="{{{id}}}" style="min-width:{{{width}}}ch;">{{{label}}}</label>'

FIELDSET_DIV='<div{{{attributes}}}>\n<fieldset><legend style="display: contents;"><label>{{{label}}}{{{tooltip}}}</label></legend>\n<div>\n{{{inputs}}}\n</div>\n</fieldset>\n</div>'

FILE_UPLOAD='''<div{{{attributes}}}>
{{{view}}}{{{label}}}<div class="file_upload_wrapper{{{wrapper_class}}}">
<input type="file" id="file_{{{uid}}}" name="{{{name}}}"{{{file_attributes}}} />
{{{prefix}}}<label for="file_{{{uid}}}" id="label_{{{uid}}}"><button type="button" class="upload_button" aria-controls="filename_{{{uid}}}" onclick="document.getElementById('file_{{{uid}}}').click();">Choose File</button></label>
<label for="filename_{{{uid}}}" class="hide">Uploaded File</label>
<input type="text" id="filename_{{{uid}}}" ondrop="formDropFile(event, '{{{uid}}}');" ondragover="return false;" autocomplete="off" readonly="readonly" placeholder="{{{placeholder}}}" />
{{{suffix}}}{{{tooltip}}}
</div>
{{{hidden}}}
</div>'''

ENCRYPTED_SCRIPT='''<script>
function changeEncrypted(elem, changeType) { elem.type = changeType; }
function toggleEncrypted(oButton) {
    var elem = document.getElementById('{{{id}}}');
    if (elem.type == 'password') { changeEncrypted(elem, 'text'); oButton.innerHTML = 'Conceal'; }
    else { changeEncrypted(elem, 'password'); oButton.innerHTML = 'Reveal'; }
}
</script>'''

REVEAL_BUTTON='<button type="button" style="display:inline-block" onclick="toggleEncrypted(this);">Reveal</button>'

MESSAGE_DIV='<div>\n<label>{{{label}}}:</label>{{{tooltip}}}\n<p style="display:inline-block;padding-top:7px;">{{{message}}}</p>\n</div>'

MESSAGE_DIV_TIGHT='<div>\n<label>{{{label}}}:</label>\n<p style="display:inline-block;padding-top:2px;white-space: pre-line;">{{{message}}}</p>\n</div>'

INLINE_MESSAGE='<label style="display:inline-block;margin:0 2px 0 0;padding:0">{{{label}}}:</label>\n{{{message}}}<br />'

UL='<ul{{{attributes}}}>{{{items}}}</ul>'

LI='<li>{{{prefix}}}{{{item}}}{{{suffix}}}</li>'

COMPOSITE_DIV='<div class="{{{class}}}">\n<label{{{for}}}{{{label_attributes}}}>{{{label}}}:</label>\n{{{elements}}}\n</div>'

LINK_DIV='<div{{{attributes}}}>\n{{{label}}}{{{prefix}}}<a {{{target}}}>{{{title}}}</a>{{{suffix}}}\n</div>'

LINK_LABEL='<label style="padding-top: 0px;">{{{label}}}:</label>\n'

BUTTON='<button type="{{{type}}}"{{{id}}}{{{class}}} name="{{{name}}}" value="{{{value}}}"{{{extra}}}{{{attributes}}}>{{{text}}}</button>'

NAV_DIV='<div class="navigation">\n{{{buttons}}}\n</div>'

CONTROLLER_MSG='<p class="{{{class}}}">{{{message}}}</p>'

TOOLTIP_SCRIPT='''<script type="text/javascript">
var prevTip = null;
function TooltipDetails(sID, bOpen) {
    var currentObj = document.getElementById(sID);
    var closeObj = document.getElementById('close_' + sID);
    if (prevTip != null && !bOpen) {
        prevTip.style.display = 'none';
        if (prevTip.id != currentObj.id) { currentObj.style.display = 'block'; prevTip = currentObj; }
        else { prevTip = null; }
    } else {
        currentObj.style.display = 'block';
        if (!bOpen) closeObj.style.display = 'block';
        prevTip = currentObj;
    }
}
</script>
'''

TOOLTIP='{{{script}}}<span{{{attributes}}} data-attribute="{{{char}}}" onclick="TooltipDetails(\'{{{id}}}\',false);" onmouseenter="TooltipDetails(\'{{{id}}}\',true);" onmouseleave="TooltipDetails(\'{{{id}}}\',false);">{{{char}}}<p id="{{{id}}}" style="width:{{{width}}}px">{{{message}}}<button type="button" id="close_{{{id}}}" name="close" style="display:none;" aria-label="Close Tooltip">Close</button></p></span>'

SPAN_MORE='''{{{shown}}}<span id="{{{less_id}}}" style="display:none;">{{{hidden}}}<a onclick="document.getElementById('{{{less_id}}}').style.display='none';document.getElementById('{{{more_id}}}').style.display='initial';">(Less)</a></span>
<a id="{{{more_id}}}" style="display:inline;" onclick="document.getElementById('{{{less_id}}}').style.display='initial';document.getElementById('{{{more_id}}}').style.display='none';">(More...)</a>'''

HYPERLINK='<a href="{{{url}}}"{{{target}}}>{{{url}}}</a>'


def render(template, **data):
    return html_template_string(template, data)

def attr(name, value):
    """ ' name="value"' or '' for an empty value """
    if value is None or value=="": return ""
    return ' %s="%s"' % (name, value)
