"""Shared fixtures for core unit tests"""

import pytest

from outlawfmt.config import Settings


SAMPLE_OUTLINE = """\
Intro line before any header.

=== Project
Some text about the project.
  * first point
  * second point
    that wraps onto a second line
      * nested point
  * back to the top

[ ] open task

> a quote
  === Subsection
| preformatted   line
```text
  keep   this


  as is
```
=== Appendix
done
"""

SAMPLE_FORMATTED = """\
Intro line before any header.

=== Project

    Some text about the project.
    * first point
    * second point
      that wraps onto a second line
        * nested point
    * back to the top

    [ ] open task

    > a quote

    === Subsection

        | preformatted   line
        ```text
          keep   this


          as is
        ```

=== Appendix

    done
"""


@pytest.fixture(name="settings")
def settings_fixture():
    return Settings()


@pytest.fixture(name="narrow_settings")
def narrow_settings_fixture():
    """Settings with a 20 character line limit for wrapping tests."""
    return Settings(max_line_length=20)


@pytest.fixture(name="sample_outline")
def sample_outline_fixture():
    return SAMPLE_OUTLINE


@pytest.fixture(name="sample_formatted")
def sample_formatted_fixture():
    return SAMPLE_FORMATTED
