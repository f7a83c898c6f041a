"""Tests for request body serialisation."""

from yuque_client.core.models import DocFormat, RepoPublic, RepoType
from yuque_client.core.requests import (
    CreateDocRequest,
    CreateRepoRequest,
    UpdateDocRequest,
    UpdateRepoRequest,
)


def test_force_asl_positive_becomes_one() -> None:
    req = UpdateDocRequest(title="t", force_asl=5)
    assert req.to_payload() == {"title": "t", "_force_asl": 1}


def test_force_asl_zero_is_dropped() -> None:
    req = UpdateDocRequest(title="t", force_asl=0)
    assert req.to_payload() == {"title": "t"}


def test_force_asl_absent_is_dropped() -> None:
    assert "_force_asl" not in UpdateDocRequest(body="x").to_payload()


def test_force_asl_normalized_on_assignment() -> None:
    req = UpdateDocRequest()
    req.force_asl = 3
    assert req.to_payload() == {"_force_asl": 1}
    req.force_asl = 0
    assert req.to_payload() == {}


def test_force_asl_accepts_wire_name() -> None:
    assert UpdateDocRequest(_force_asl=2).force_asl == 1


def test_update_repo_omits_unset_fields() -> None:
    req = UpdateRepoRequest(name="renamed", public=RepoPublic.PUBLIC)
    assert req.to_payload() == {"name": "renamed", "public": 1}


def test_create_repo_payload() -> None:
    req = CreateRepoRequest(name="n", slug="s", description="d")
    assert req.to_payload() == {
        "name": "n",
        "slug": "s",
        "description": "d",
        "public": 0,
        "type": "Book",
    }
    design = CreateRepoRequest(
        name="n", slug="s", description="d", public=RepoPublic.GROUP_ALL, type=RepoType.DESIGN
    )
    assert design.to_payload()["type"] == "Design"
    assert design.to_payload()["public"] == 3


def test_create_doc_format() -> None:
    req = CreateDocRequest(title="t", slug="s", body="# Hi")
    assert "format" not in req.to_payload()
    req = CreateDocRequest(title="t", slug="s", body="<p>Hi</p>", format=DocFormat.HTML)
    assert req.to_payload()["format"] == "html"
