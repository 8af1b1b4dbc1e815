from __future__ import annotations

import pytest

from formhtml.config import config
from formhtml.htmltemplate import FormBuilder


def test_select_marks_selected_option(builder: FormBuilder) -> None:
    html = builder.select("color", "Color", "b", {"a": "A", "b": "B"})
    assert html == (
        '<select id="color_1" name="FieldValues[Color]">'
        '<option value="a">A</option><option value="b" selected="selected">B</option>'
        "</select>"
    )


def test_select_accepts_pairs_and_integer_values(builder: FormBuilder) -> None:
    html = builder.select("size", "Size", 2, [(1, "Small"), (2, "Large")])
    assert '<option value="2" selected="selected">Large</option>' in html


def test_multiple_select_posts_array(builder: FormBuilder) -> None:
    html = builder.select("tags", "Tags", "a,c", {"a": "A", "b": "B", "c": "C"}, {"multiple": "multiple"})
    assert 'name="Multiple[Tags][]" multiple="multiple"' in html
    assert '<option value="a" selected="selected">A</option>' in html
    assert '<option value="b">B</option>' in html
    assert '<option value="c" selected="selected">C</option>' in html


def test_select_affixes_carry_class(builder: FormBuilder) -> None:
    html = builder.select("size", "Size", "", {}, {"class": "short", "suffix": "cm"})
    assert html.endswith('</select><span class="short">cm</span>')


def test_select_db_rows(builder: FormBuilder) -> None:
    rows = [{"ID": 1, "Name": "One"}, {"ID": 2, "Name": "Two"}]
    html = builder.select_db_rows("pick", "Pick", rows, "ID", "Name", "2")
    assert '<option value="1">One</option><option value="2" selected="selected">Two</option>' in html


def test_div_select_db_rows_keeps_leading_options(builder: FormBuilder) -> None:
    rows = [{"ID": 1, "Name": "One"}]
    html = builder.div_select_db_rows("Pick", "Pick", rows, "ID", "Name", "-1", None, {"-1": "-- Select --"})
    assert '<option value="-1" selected="selected">-- Select --</option><option value="1">One</option>' in html
    assert '<label for="pick_1">Pick:</label>' in html


def test_div_select_multiple_clears_selection(builder: FormBuilder) -> None:
    html = builder.div_select("Tags", "Tags", ["a"], {"a": "A"}, {"multiple": "multiple", "class": "required"})
    assert html.count('type="hidden"') == 1
    assert 'name="Multiple[Tags][]" value=""' in html
    assert 'class="label_required"' in html


def test_checkbox_group_has_one_clearing_field(builder: FormBuilder) -> None:
    red = builder.input_checkbox("Red", "color", "Colors", "R", True)
    blue = builder.input_checkbox("Blue", "color", "Colors", "B")
    assert red.count('type="hidden"') == 1
    assert 'type="hidden"' not in blue
    assert 'name="Multiple[Colors][]" value="R" checked="checked" />' in red
    assert '<label for="color_3" style="min-width:8ch;">Blue</label>' in blue

    group = builder.div_checkbox("Colors", [red, blue])
    assert group.startswith('<div class="checkbox_div">')
    assert "<legend" in group
    assert "<label>Colors:</label>" in group


def test_radio_group(builder: FormBuilder) -> None:
    yes = builder.input_radio("Yes", "answer", "Answer", "Y", True)
    no = builder.input_radio("No", "answer", "Answer", "N")
    assert yes == (
        '<input type="radio" id="answer_1" name="FieldValues[Answer]" value="Y" checked="checked" />\n'
        '<label for="answer_1">Yes</label>'
    )
    assert 'id="answer_2"' in no
    assert builder.div_radio("Answer", [yes, no], {}, "").startswith('<div class="radio_div">')


def test_text_area_and_div_text_area(builder: FormBuilder) -> None:
    html = builder.text_area("notes", "Notes", "hi", placeholder="Type")
    assert html == '<textarea id="notes_1" placeholder="Type" name="FieldValues[Notes]">hi</textarea>'

    html = builder.div_text_area("What", "Why", "When", {})
    assert '<label for="why_2">What:</label>' in html
    assert '<textarea id="why_2" name="FieldValues[Why]">When</textarea>' in html


def test_div_text_area_note_drops_readonly(builder: FormBuilder) -> None:
    html = builder.div_text_area_note("Note", "Note", "text", {"readonly": "readonly"}, "form_7")
    assert "readonly" not in html
    assert "onBlur=\"autoUpdate('form_7');\"" in html
    assert '<label for="note_1" style="float:left;width: 30px;">Note:</label>' in html


def test_text_display_and_header(builder: FormBuilder) -> None:
    assert builder.text_display("info", "Info", "") == ""
    html = builder.text_display("info", "Info", "Some text")
    assert '<label style="font-weight:bold">Info:</label>Some text</div>' in html
    assert builder.header("h3", "Title") == '<h3 id="h3_2">Title</h3>'


def test_hidden(builder: FormBuilder) -> None:
    assert builder.hidden("RecordID", "5") == '<input type="hidden" id="record_id_1" name="FieldValues[RecordID]" value="5" />'
    assert 'name="RecordID"' in builder.hidden("RecordID", "5", False)


def test_post_array_override(builder: FormBuilder) -> None:
    with builder.post_array("Verify"):
        assert 'name="Verify[Checked]"' in builder.hidden("Checked", "1")
    assert 'name="FieldValues[Checked]"' in builder.hidden("Checked", "1")


def test_ul_and_messages(builder: FormBuilder) -> None:
    assert builder.ul(["a", "b"], {"class": "list"}) == '<ul class="list"><li>a</li><li>b</li></ul>'
    assert "<label>Status:</label>" in builder.div_message("Status", "Done")
    assert "white-space: pre-line;" in builder.div_message_tight("Status", "Done")
    assert builder.inline_message("Status", "Done").endswith("Done<br />")


def test_links(builder: FormBuilder) -> None:
    html = builder.div_link("Site", "Home", "/home")
    assert '<label style="padding-top: 0px;">Site:</label>' in html
    assert '<a href="/home">Home</a>' in html
    assert '<a onclick="go();">Go</a>' in builder.div_on_click("", "Go", "go();")


def test_controller_msgs_and_add_link() -> None:
    assert FormBuilder.controller_msgs("ok", None) == '<p class="success">ok</p>'
    assert FormBuilder.controller_msgs(None, "bad") == '<p class="error">bad</p>'
    assert FormBuilder.controller_msgs() == ""
    assert FormBuilder.add_link("see http://x.org now") == 'see <a href="http://x.org">http://x.org</a> now'
    assert 'target="_BLANK"' in FormBuilder.add_link("http://x.org", True)
    assert FormBuilder.add_link("no link") == "no link"


def test_span_more(builder: FormBuilder) -> None:
    assert builder.span_more("short", 100) == "short"
    html = builder.span_more("word " * 30, 50)
    assert 'id="less_1"' in html
    assert "(More...)" in html


def test_div_name(builder: FormBuilder) -> None:
    html = builder.div_name({"FirstName": "Ann", "LastName": "Lee"}, {"class": "required"})
    assert html.startswith('<div class="user_name">')
    assert '<label for="first_name_1" class="label_required">First, Last Name:</label>' in html
    assert 'id="first_name_1" name="FieldValues[FirstName]" value="Ann"' in html
    assert 'id="last_name_1" name="FieldValues[LastName]" value="Lee"' in html
    assert 'placeholder="Last Name"' in html


def test_div_name_middle_name_is_never_required(builder: FormBuilder) -> None:
    html = builder.div_name({"FirstName": "Ann", "MiddleName": "", "LastName": "Lee"}, {"class": "required"})
    assert "First, Middle, Last Name" in html
    middle = [line for line in html.split("\n") if "middle_name_1" in line][0]
    assert "required" not in middle


def test_div_city_state_zip_defaults_state(builder: FormBuilder) -> None:
    html = builder.div_city_state_zip({"City": "Boston", "State": "", "Zip": "02101"})
    assert "City, State, Zip Code:" in html
    assert '<option value="MA" selected="selected">Massachusetts</option>' in html
    assert 'id="zip_code_1" name="FieldValues[Zip]" value="02101"' in html


def test_div_phone(builder: FormBuilder) -> None:
    html = builder.div_phone("Phone", {"PhoneDesc": "Work", "PhoneNo": "555-555-1212", "PhoneExt": ""}, None, "Daytime")
    assert '<label for="phone_no_1">Phone:</label>' in html
    assert '<option value="Work" selected="selected">Work</option>' in html
    assert 'class="phone_number" maxlength="12" placeholder="555-555-1212"' in html
    assert "tooltip-wrap" in html


@pytest.mark.parametrize(
    "call",
    [
        lambda b: b.div_name({"FirstName": "Ann"}),
        lambda b: b.div_city_state_zip({"City": "Boston"}),
        lambda b: b.div_phone("Phone", {"PhoneNo": "1", "PhoneExt": ""}),
    ],
)
def test_composites_reject_wrong_field_count(builder: FormBuilder, log_buffer, call) -> None:
    assert call(builder) == ""
    assert "invalid field values" in log_buffer.getvalue()


def test_buttons(builder: FormBuilder) -> None:
    assert builder.form_close() == (
        '<button type="button" name="Close" value="Close" onclick="formClose();" class="close">Close</button>'
    )
    html = builder.ajax_button("Save", "Save", "form_1")
    assert "onclick=\"formSubmit(this, 'form_1', 'PARENT');\"" in html
    assert "PostButton" not in html
    assert builder.nav_ajax_button("Save", "form_1").startswith('<div class="navigation">')
    assert 'name="PostButton" value="New"' in builder.form_submit_new_self("New", "Create")
    assert "formSubmitNew(this, 'form_1', '/new');" in builder.form_submit_new_destination("Create", "form_1", "/new")
    assert 'name="AjaxDelete"' in builder.form_submit_delete("Delete", "form_1", "/delete")


def test_ajax_form_page_ids(builder: FormBuilder) -> None:
    html = builder.ajax_form_page("Edit", "Edit Item", "open();")
    assert 'id="AjaxButtonEditItemEdit1"' in html
    assert 'aria-controls="generic_popup_form" onclick="open();"' in html
    html = builder.ajax_form_page_db_field("Edit", "Edit", "open();", "Change")
    assert 'id="AjaxButtonEditEdit2" class="subtleLink"' in html
    assert 'title="Change"' in html


def test_debug_submit_button_from_config(builder: FormBuilder) -> None:
    config.set("ajax.debug_submit", True)
    html = builder.ajax_button("Save", "Save", "form_1")
    assert '<button type="submit" name="PostButton" value="Save">Submit Save</button>' in html


def test_field_tooltip_in_label(builder: FormBuilder) -> None:
    builder.add_tooltip("City", "Where you live")
    html = builder.div_input_text("City", "City", "")
    assert html.count("<script") == 1
    assert '<span class="tooltip-wrap" data-attribute="?"' in html
    assert "TooltipDetails('tip_1',false);" in html
    assert "Where you live" in html


def test_tooltips(builder: FormBuilder) -> None:
    assert builder.tooltip("") == ""
    first = builder.tooltip("one")
    second = builder.tooltip_warning("two")
    assert "<script" in first
    assert "<script" not in second
    assert 'class="tooltip-wrap Warning"' in second
    assert 'data-attribute="!"' in second
    assert 'id="tip_2"' in second
    assert "(a) AND<br /> (b)" in builder.tooltip("(a) AND (b)")


def test_missing_values_select_nothing(builder: FormBuilder) -> None:
    html = builder.select("s", "S", None, {"None": "x", "a": "A"})
    assert "selected" not in html
    html = builder.select("t", "T", None, {"a": "A"}, {"multiple": "multiple"})
    assert "selected" not in html


def test_missing_text_values(builder: FormBuilder) -> None:
    assert builder.text_area("t", "T", None) == '<textarea id="t_1" name="FieldValues[T]"></textarea>'
    assert builder.text_display("info", "Info", None) == ""


def test_flags_do_not_leak_to_later_tooltips(builder: FormBuilder) -> None:
    builder.div_input("text", "A", "A", "", {"style": "display:none;"})
    html = builder.div_message("B", "msg", builder.tooltip("x"))
    assert '<span class="tooltip-wrap" data-attribute="?"' in html
    assert "display:none" not in html


def test_match_condition_class_reaches_field_tooltip(builder: FormBuilder) -> None:
    builder.add_tooltip("City", "Hint")
    html = builder.div_input("text", "City", "City", "", {"class": "MatchCondition_2", "style": "display:none;"})
    assert '<span class="tooltip-wrap MatchCondition_2" style="display:none;" data-attribute="?"' in html
    assert "MatchCondition_2" not in builder.tooltip("later")
