# clinic/resources/registry.py
"""
Named factories for every content type served by the site.

Each factory returns a fresh, unfetched resource; callers own its state.
Factory keyword arguments become the resource's parameters.
"""
from __future__ import annotations

import inspect
from typing import Any, Callable, Dict

from clinic.domain.invariants.exceptions import ValidationError
from clinic.models.conditions import ConditionsSection, EyeCondition
from clinic.models.doctor import DoctorProfile, Qualification
from clinic.models.faq import Faq
from clinic.models.get_started import GetStartedContent
from clinic.models.hero_section import HeroSection
from clinic.models.service import Service
from clinic.models.testimonial import Testimonial
from clinic.models.why_choose import BenefitCard, WhyChooseSection
from .defaults import default_doctor
from .holidays import HolidaysResource, ManualHolidaysResource
from .remote import Query, RemoteResource


def eyecare_hero() -> RemoteResource:
    return RemoteResource(
        "eyecare-hero",
        {"hero": Query(HeroSection, order_by="created_at", descending=True)},
        image_purpose="hero",
    )


def why_choose_us(section: str = "why_choose_us") -> RemoteResource:
    return RemoteResource(
        "why-choose-us",
        {
            "section": Query(WhyChooseSection, filters={"section": "section"}),
            "cards": Query(
                BenefitCard,
                many=True,
                filters={"section": "section"},
                order_by="created_at",
            ),
        },
        section=section,
    )


def eyecare_conditions() -> RemoteResource:
    return RemoteResource(
        "eyecare-conditions",
        {
            "section": Query(ConditionsSection),
            "conditions": Query(EyeCondition, many=True, order_by="display_order"),
        },
    )


def get_started(name: str = "get_started") -> RemoteResource:
    return RemoteResource(
        "get-started",
        {"content": Query(GetStartedContent, filters={"name": "name"})},
        name=name,
    )


def doctor_profile(department: str = "eye") -> RemoteResource:
    return RemoteResource(
        "doctor-profile",
        {
            "profile": Query(
                DoctorProfile,
                filters={"department": "department"},
                order_by="created_at",
                default=default_doctor,
            )
        },
        image_purpose="doctor",
        department=department,
    )


def doctor_qualifications(department: str = "eye") -> RemoteResource:
    return RemoteResource(
        "doctor-qualifications",
        {
            "qualifications": Query(
                Qualification,
                many=True,
                filters={"department": "department"},
                order_by="display_order",
            )
        },
        department=department,
    )


def services(department: str = "eye", category: str | None = None) -> RemoteResource:
    return RemoteResource(
        "services",
        {
            "services": Query(
                Service,
                many=True,
                filters={"department": "department", "category": "category"},
                order_by="display_order",
            )
        },
        department=department,
        category=category,
    )


def testimonials(department: str = "gynecology") -> RemoteResource:
    return RemoteResource(
        "testimonials",
        {
            "testimonials": Query(
                Testimonial,
                many=True,
                filters={"department": "department"},
                order_by="created_at",
            )
        },
        department=department,
    )


def faqs() -> RemoteResource:
    return RemoteResource(
        "faqs",
        {"faqs": Query(Faq, many=True, order_by="created_at")},
    )


def holidays() -> RemoteResource:
    return HolidaysResource()


def manual_holidays(doctor: str = "eye") -> RemoteResource:
    return ManualHolidaysResource(doctor)


RESOURCES: Dict[str, Callable[..., RemoteResource]] = {
    "eyecare-hero": eyecare_hero,
    "why-choose-us": why_choose_us,
    "eyecare-conditions": eyecare_conditions,
    "get-started": get_started,
    "doctor-profile": doctor_profile,
    "doctor-qualifications": doctor_qualifications,
    "services": services,
    "testimonials": testimonials,
    "faqs": faqs,
    "holidays": holidays,
    "manual-holidays": manual_holidays,
}


def build_resource(name: str, **params: Any) -> RemoteResource:
    """
    Instantiate a registered resource. Unknown parameters are ignored so
    query strings can be passed straight through.
    """
    factory = RESOURCES.get(name)
    if factory is None:
        raise ValidationError(f"Unknown content type: {name}")

    accepted = inspect.signature(factory).parameters
    kwargs = {k: v for k, v in params.items() if k in accepted and v not in (None, "")}
    return factory(**kwargs)
