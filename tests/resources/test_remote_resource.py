"""Tests for the generic remote resource and the content registry."""
from __future__ import annotations

import io

import pytest  # type: ignore[import-not-found]
from sqlalchemy.exc import OperationalError
from werkzeug.datastructures import FileStorage

from clinic.domain.invariants.exceptions import InvariantViolation, QueryError, ValidationError
from clinic.extensions import db
from clinic.models import DoctorProfile, Faq, HeroSection, Testimonial
from clinic.resources import Query, build_resource


def test_singleton_without_row_and_default_is_none(app):
    resource = build_resource("eyecare-hero").fetch()

    assert resource.data is None
    assert resource.error is None
    assert resource.is_loading is False


def test_singleton_without_row_uses_department_default(app):
    resource = build_resource("doctor-profile", department="gynecology").fetch()

    assert resource.data["name"] == "Dr. Nisha Bhatnagar"
    assert resource.data["id"] is None


def test_list_without_rows_is_empty_list(app):
    for name in ("faqs", "testimonials", "services", "doctor-qualifications"):
        resource = build_resource(name).fetch()
        assert resource.data == [], name


def test_multi_part_resource_returns_dict(app):
    resource = build_resource("eyecare-conditions").fetch()

    assert resource.data == {"section": None, "conditions": []}


def test_fetch_returns_latest_hero(app):
    db.session.add(HeroSection(title="Clear vision", subtitle="Care for every eye"))
    db.session.commit()

    resource = build_resource("eyecare-hero").fetch()

    assert resource.data["title"] == "Clear vision"
    assert resource.data["subtitle"] == "Care for every eye"


def test_unknown_content_type_rejected(app):
    with pytest.raises(ValidationError):
        build_resource("not-a-section")


def test_build_resource_ignores_unrelated_params(app):
    resource = build_resource("faqs", department="eye", page="2")

    assert resource.params == {}


def test_fetch_failure_keeps_previous_data(app, monkeypatch):
    db.session.add(Faq(question="Q?", answer="A."))
    db.session.commit()
    resource = build_resource("faqs").fetch()
    assert len(resource.data) == 1

    def boom(self, params):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr(Query, "run", boom)
    resource.refresh()

    assert isinstance(resource.error, QueryError)
    assert str(resource.error) == "Failed to load faqs"
    assert len(resource.data) == 1
    assert resource.to_json()["error"] == "Failed to load faqs"


def test_set_params_refetches_only_on_change(app, monkeypatch):
    resource = build_resource("testimonials", department="eye").fetch()
    calls = []
    original = resource.fetch

    def counting_fetch():
        calls.append(dict(resource.params))
        return original()

    monkeypatch.setattr(resource, "fetch", counting_fetch)

    resource.set_params(department="eye")
    resource.set_params(department="gynecology")
    resource.set_params(department="gynecology")

    assert calls == [{"department": "gynecology"}]


def test_update_rejects_unknown_field(app):
    db.session.add(HeroSection(title="Old"))
    db.session.commit()
    resource = build_resource("eyecare-hero").fetch()

    assert resource.update({"colour": "red"}) is False
    assert isinstance(resource.error, ValidationError)
    assert resource.data["title"] == "Old"


def test_update_rejects_empty_patch(app):
    db.session.add(HeroSection(title="Old"))
    db.session.commit()
    resource = build_resource("eyecare-hero").fetch()

    assert resource.update({}) is False
    assert str(resource.error) == "No valid fields provided for update"


def test_update_patches_loaded_row_and_resyncs(app):
    db.session.add(HeroSection(title="Old"))
    db.session.commit()
    resource = build_resource("eyecare-hero").fetch()

    assert resource.update({"title": "New"}) is True
    assert resource.error is None
    assert resource.data["title"] == "New"


def test_update_without_row_or_default_fails(app):
    resource = build_resource("eyecare-hero").fetch()

    assert resource.update({"title": "New"}) is False
    assert str(resource.error) == "eyecare-hero not found"


def test_update_on_default_profile_creates_row(app):
    resource = build_resource("doctor-profile", department="eye").fetch()

    assert resource.update({"title": "Chief Surgeon"}) is True

    row = DoctorProfile.query.filter_by(department="eye").one()
    assert row.name == "Dr. Sanjeev Lehri"
    assert row.title == "Chief Surgeon"
    assert resource.data["id"] == row.id


def test_update_with_image_uploads_and_sets_url(app):
    db.session.add(HeroSection(title="Old"))
    db.session.commit()
    resource = build_resource("eyecare-hero").fetch()
    image = FileStorage(stream=io.BytesIO(b"\x89PNG"), filename="banner.png")

    assert resource.update({}, image) is True

    url = resource.data["image_url"]
    assert url.startswith("/media/website-images/hero-images/eyecare-hero-")
    assert url.endswith(".png")


def test_update_with_disallowed_image_type(app):
    db.session.add(HeroSection(title="Old"))
    db.session.commit()
    resource = build_resource("eyecare-hero").fetch()
    image = FileStorage(stream=io.BytesIO(b"MZ"), filename="virus.exe")

    assert resource.update({"title": "New"}, image) is False
    assert str(resource.error) == "File type not allowed"
    assert HeroSection.query.one().title == "Old"


def test_update_list_item_requires_row_id(app):
    resource = build_resource("faqs").fetch()

    assert resource.update({"answer": "x"}) is False
    assert isinstance(resource.error, ValidationError)


def test_insert_binds_resource_params(app):
    resource = build_resource("testimonials", department="eye").fetch()

    assert resource.insert({"author": "Ravi K.", "quote": "Great care."}) is True

    assert [t["author"] for t in resource.data] == ["Ravi K."]
    assert Testimonial.query.one().department == "eye"


def test_instances_do_not_share_state(app):
    first = build_resource("faqs").fetch()
    second = build_resource("faqs").fetch()

    first.insert({"question": "Q?", "answer": "A."})

    assert len(first.data) == 1
    assert second.data == []


def test_update_with_unknown_row_id_does_not_create_rows(app):
    resource = build_resource("doctor-profile", department="eye").fetch()
    resource.update({"title": "A"})

    assert resource.update({"title": "B"}, row_id="does-not-exist") is False
    assert str(resource.error) == "doctor-profile not found"
    assert DoctorProfile.query.filter_by(department="eye").count() == 1


def test_update_ignores_rows_outside_bound_params(app):
    other = Testimonial(department="gynecology", author="Meera", quote="Kind and calm.")
    db.session.add(other)
    db.session.commit()
    resource = build_resource("testimonials", department="eye").fetch()

    assert resource.update({"quote": "changed"}, row_id=other.id) is False
    assert db.session.get(Testimonial, other.id).quote == "Kind and calm."


def test_unfetched_singleton_update_patches_existing_row(app):
    db.session.add(DoctorProfile(department="eye", name="Dr. A"))
    db.session.commit()
    resource = build_resource("doctor-profile", department="eye")

    assert resource.update({"title": "Surgeon"}) is True
    assert DoctorProfile.query.filter_by(department="eye").count() == 1
    assert resource.data["title"] == "Surgeon"


def test_holiday_resource_validates_writes(app):
    resource = build_resource("holidays").fetch()

    assert resource.insert({"date": "2025-01-26", "name": "Republic Day", "type": "bogus"}) is False
    assert isinstance(resource.error, InvariantViolation)

    assert resource.insert({"date": "someday", "name": "x"}) is False
    assert isinstance(resource.error, ValidationError)

    assert resource.insert({"date": "2025-01-26", "name": "Republic Day", "type": "national"}) is True
    row_id = resource.data[0]["id"]

    assert resource.update({"type": "bogus"}, row_id=row_id) is False
    assert resource.update({"date": "2025-01-27T08:00:00"}, row_id=row_id) is True
    assert resource.data[0]["date"] == "2025-01-27"
    assert resource.data[0]["type"] == "national"
