from app.services.journal.sections import extract_sections


def test_summary_and_technical_details_split():
    out = extract_sections("## Summary\nA B C\n## Technical Details\n- x\n- y")
    assert out.summary == "A B C"
    assert out.technical_details == "- x\n- y"


def test_plain_text_falls_back_to_full_response():
    out = extract_sections("Just plain text")
    assert out.summary == "Just plain text"
    assert out.technical_details == ""


def test_headings_are_case_insensitive_and_level_one_or_two():
    text = "# SUMMARY\n\nDid things.\n\n#technical details\n\n- one\n"
    out = extract_sections(text)
    assert out.summary == "Did things."
    assert out.technical_details == "- one"


def test_summary_runs_to_end_without_technical_section():
    out = extract_sections("Intro line\n## Summary\nFirst.\nSecond.\n")
    assert out.summary == "First.\nSecond."
    assert out.technical_details == ""


def test_technical_section_without_summary_heading():
    text = "Some preamble\n## Technical Details\n- a"
    out = extract_sections(text)
    assert out.summary == text
    assert out.technical_details == "- a"


def test_level_three_heading_is_not_a_section():
    text = "### Summary\nbody"
    out = extract_sections(text)
    assert out.summary == text


def test_empty_summary_body_falls_back_to_full_text():
    text = "## Summary\n\n## Technical Details\n- a"
    out = extract_sections(text)
    assert out.summary == text
    assert out.technical_details == "- a"


def test_crlf_line_endings():
    out = extract_sections("## Summary\r\nA\r\n## Technical Details\r\n- b\r\n")
    assert out.summary == "A"
    assert out.technical_details == "- b"


def test_parsing_is_deterministic():
    text = "## Summary\nsame\n## Technical Details\n- same"
    assert extract_sections(text) == extract_sections(text)
