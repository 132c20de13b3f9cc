from pathlib import Path

import pytest
from pydantic import ValidationError

from vuereg.models.component import ComponentSections, FailurePolicy, Section
from vuereg.models.file import SourceFile


def test_source_file_derived_parts():
    f = SourceFile(
        path=Path("/test/components/forms/Input.vue"),
        base=Path("/test"),
        contents=b"<template></template>",
    )
    assert f.relative == Path("components/forms/Input.vue")
    assert f.stem == "Input"
    assert f.suffix == ".vue"
    assert f.text == "<template></template>"


def test_source_file_frozen():
    f = SourceFile(path=Path("/test/A.vue"), base=Path("/test"), contents=b"")
    with pytest.raises(ValidationError):
        f.contents = b"changed"


def test_component_sections_missing():
    assert ComponentSections(template="<div/>", script="{}").missing == []
    assert ComponentSections(script="{}").missing == [Section.TEMPLATE]
    assert ComponentSections().missing == [Section.TEMPLATE, Section.SCRIPT]


def test_enums():
    assert Section.TEMPLATE == "template"
    assert Section.SCRIPT == "script"
    assert FailurePolicy.SKIP == "skip"
    assert FailurePolicy.FAIL == "fail"


def test_source_file_must_live_under_base():
    with pytest.raises(ValidationError, match="not under base"):
        SourceFile(path=Path("/elsewhere/A.vue"), base=Path("/test"), contents=b"")
