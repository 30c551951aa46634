from services.resume_parser.contact import (
    extract_address,
    extract_email,
    extract_full_name,
    extract_name,
    extract_phone,
    split_full_name,
)


def test_name_with_middle_initial():
    name = extract_name("Jane Q. Public\njane@example.com\n")
    assert name.first_name == "Jane"
    assert name.middle_name == "Q."
    assert name.last_name == "Public"


def test_all_caps_name_is_title_cased():
    assert extract_full_name("JOHN SMITH\nSoftware Engineer\n") == "John Smith"


def test_labeled_name_wins():
    text = "Curriculum Vitae\nName: Maria Garcia\nEmail: maria@example.com\n"
    assert extract_full_name(text) == "Maria Garcia"


def test_title_lines_are_not_names():
    text = "Curriculum Vitae\nAlex Morgan\nalex@example.com\n"
    assert extract_full_name(text) == "Alex Morgan"


def test_fallback_name_skips_titles_and_headers():
    assert extract_full_name("Curriculum Vitae\nalex@example.com\n") == ""
    text = "john smith\njohn@example.com\n\nSoft Skills\nTeamwork, Leadership\n"
    assert extract_full_name(text) == ""


def test_fallback_name_after_skipped_header():
    text = "objective: build things\n\nSoft Skills\nworked with Alex Morgan on APIs\n"
    assert extract_full_name(text) == "Alex Morgan"


def test_empty_text_has_no_name():
    assert extract_full_name("") == ""
    assert extract_name("").full_name == ""


def test_split_full_name():
    assert split_full_name("Cher").first_name == "Cher"
    assert split_full_name("Cher").last_name == ""

    two = split_full_name("Ada Lovelace")
    assert (two.first_name, two.middle_name, two.last_name) == ("Ada", "", "Lovelace")

    long = split_full_name("Juan Carlos de la Cruz")
    assert long.first_name == "Juan"
    assert long.middle_name == "Carlos de la"
    assert long.last_name == "Cruz"


def test_extract_email():
    assert extract_email("Contact: jane@example.com") == "jane@example.com"
    assert extract_email("no address here") == ""


def test_labeled_phone():
    assert extract_phone("Phone: (555) 123-4567") == "(555) 123-4567"


def test_labeled_phone_preferred_over_earlier_number():
    text = "Order ID 555 111 2222\nMobile: +91 98765 43210"
    assert extract_phone(text) == "+91 98765 43210"


def test_bare_phone():
    assert extract_phone("Call me at 555.123.4567 anytime") == "555.123.4567"


def test_no_phone():
    assert extract_phone("Graduated in 2019") == ""


def test_labeled_address_in_contact_section():
    text = (
        "Contact Information\n"
        "Address: 12 Baker Street, London\n"
        "Email: jane@example.com\n"
        "\n"
        "Education\n"
        "State University\n"
    )
    assert extract_address(text) == "12 Baker Street, London"


def test_city_state_zip_address():
    text = "Contact\nJane Doe\nSpringfield, IL 62704\n"
    assert extract_address(text) == "Springfield, IL 62704"


def test_address_needs_contact_section():
    text = "Summary\nAddress: 12 Baker Street, London\n"
    assert extract_address(text) == ""
