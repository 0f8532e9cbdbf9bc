from __future__ import annotations

from datetime import datetime, timezone

import pytest

SAMPLE_HTML = """<!DOCTYPE html>
<html>
<head>
  <title> Acme Widgets | Contact </title>
  <style>.hidden { display: none; }</style>
</head>
<body>
  <nav><a href="/about">About</a></nav>
  <h1>Contact us</h1>
  <p>Email <a href="mailto:Sales@Acme.test?subject=Hello">Sales@Acme.test</a> or support@acme.test.</p>
  <p>Call <a href="tel:+1-555-000-1111">+1 (555) 000-1111</a></p>
  <footer>
    <a href="https://www.facebook.com/acmewidgets">Facebook</a>
    <a href="https://www.facebook.com/sharer/sharer.php?u=https://acme.test">Share</a>
    <a href="https://github.com/acme">GitHub</a>
    <a href="https://github.com/acme">GitHub again</a>
    <a href="https://linkedin.com/login">LinkedIn</a>
  </footer>
  <script>var hidden = "robot@spam.test";</script>
</body>
</html>
"""

FIXED_MOMENT = datetime(2026, 10, 19, 8, 30, 0, 123000, tzinfo=timezone.utc)


@pytest.fixture
def sample_html() -> str:
    return SAMPLE_HTML


@pytest.fixture
def sample_html_file(tmp_path):
    path = tmp_path / "contact.html"
    path.write_text(SAMPLE_HTML, encoding="utf-8")
    return path


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_MOMENT
