"""Project schemas — request validation and camelCase wire format.

Invariants:
    - displayOrder is never accepted from a request body
    - ReorderRequest.featured must be a real boolean
    - Text fields are stripped and HTML-escaped
"""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from app.models import Profile, Project, User, WorkExperience
from app.schemas.project import ProjectCreate, ProjectUpdate, ReorderRequest


def _body(**overrides) -> dict:
    body = {
        "title": "Portfolio",
        "description": "Personal site",
        "image": "https://img.example.com/cover.png",
        "technologies": ["python"],
        "githubUrl": "https://github.com/owner/repo",
        "url": "https://demo.example.com/app",
    }
    body.update(overrides)
    return body


def test_create_defaults():
    project = ProjectCreate(**_body())
    assert project.featured is False
    assert project.status.value == "draft"


def test_create_drops_display_order():
    columns = ProjectCreate(**_body(displayOrder=9)).to_columns()
    assert "display_order" not in columns


def test_update_featured_is_optional():
    assert ProjectUpdate(**_body()).featured is None
    assert ProjectUpdate(**_body(featured=True)).featured is True


def test_title_too_long_rejected():
    with pytest.raises(ValidationError):
        ProjectCreate(**_body(title="x" * 101))


def test_blank_description_rejected():
    with pytest.raises(ValidationError):
        ProjectCreate(**_body(description="   "))


def test_blank_technology_rejected():
    with pytest.raises(ValidationError):
        ProjectCreate(**_body(technologies=["python", " "]))


def test_relative_url_rejected():
    with pytest.raises(ValidationError):
        ProjectCreate(**_body(githubUrl="/owner/repo"))


def test_non_http_scheme_rejected():
    with pytest.raises(ValidationError):
        ProjectCreate(**_body(image="ftp://img.example.com/a.png"))


def test_urls_stored_trimmed_but_not_rewritten():
    columns = ProjectCreate(**_body(
        image=" https://img.example.com ", githubUrl="https://GitHub.com/Owner",
    )).to_columns()

    assert columns["image"] == "https://img.example.com"
    assert columns["github_url"] == "https://GitHub.com/Owner"


def test_over_long_url_rejected():
    with pytest.raises(ValidationError):
        ProjectCreate(**_body(url="https://a.example.com/" + "x" * 2048))


def test_text_escaped():
    project = ProjectCreate(**_body(description=" a <script> "))
    assert project.description == "a &lt;script&gt;"


def test_reorder_requires_ids():
    with pytest.raises(ValidationError):
        ReorderRequest(ids=[], featured=True)


@pytest.mark.parametrize("featured", ["true", 1, None])
def test_reorder_featured_must_be_bool(featured):
    with pytest.raises(ValidationError):
        ReorderRequest(ids=[uuid4()], featured=featured)


def test_reorder_accepts_uuid_strings():
    pid = uuid4()
    request = ReorderRequest(ids=[str(pid)], featured=False)
    assert request.ids == [pid]


@pytest.mark.parametrize("column", [
    Project.__table__.c.title,
    User.__table__.c.name,
    Profile.__table__.c.headline,
    WorkExperience.__table__.c.job_title,
    WorkExperience.__table__.c.company_name,
    WorkExperience.__table__.c.start_date,
    WorkExperience.__table__.c.end_date,
])
def test_escaped_text_columns_have_no_length_cap(column):
    assert column.type.length is None
