from services.resume_parser.certifications import extract_certifications


def test_bulleted_certifications():
    text = (
        "Certifications\n"
        "• AWS Certified Solutions Architect\n"
        "• Certified Kubernetes Administrator (CKA)\n"
    )
    assert extract_certifications(text) == (
        "AWS Certified Solutions Architect\n"
        "Certified Kubernetes Administrator (CKA)"
    )


def test_certificates_header():
    text = "Certificates:\nGoogle Data Analytics\n-----\nScrum Fundamentals\n"
    assert extract_certifications(text) == "Google Data Analytics\nScrum Fundamentals"


def test_no_certifications():
    assert extract_certifications("Skills\nPython\n") == ""
