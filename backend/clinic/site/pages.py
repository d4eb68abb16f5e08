# clinic/site/pages.py
from flask import render_template, current_app
from clinic.resources import build_resource
from clinic.resources.defaults import DEFAULT_FAQS, DEFAULT_TESTIMONIALS
from clinic.utils.widgets import get_widget_loader
from . import site_bp

DEPARTMENT_TITLES = {
    "eye": "Eye Care",
    "gynecology": "Gynecology",
}


def load(name, **params):
    """Fetch a resource for rendering; failures render as empty sections."""
    resource = build_resource(name, **params).fetch()
    if resource.error:
        current_app.logger.warning("Rendering %s without data: %s", name, resource.error)
    return resource.data


def department_context(department):
    return {
        "department": department,
        "department_title": DEPARTMENT_TITLES[department],
        "doctor": load("doctor-profile", department=department),
        "qualifications": load("doctor-qualifications", department=department) or [],
        "services": load("services", department=department) or [],
        "testimonials": load("testimonials", department=department) or DEFAULT_TESTIMONIALS,
        "faqs": load("faqs") or DEFAULT_FAQS,
        "widgets": get_widget_loader(),
        "reviews_app_id": current_app.config.get("ELFSIGHT_REVIEWS_APP_ID"),
    }


@site_bp.route("/", methods=["GET"])
def home():
    return render_template(
        "site/home.html",
        why_choose=load("why-choose-us"),
        get_started=load("get-started"),
    )


@site_bp.route("/eyecare", methods=["GET"])
def eyecare():
    context = department_context("eye")
    context.update(
        hero=load("eyecare-hero"),
        conditions=load("eyecare-conditions"),
    )
    return render_template("site/department.html", **context)


@site_bp.route("/gynecology", methods=["GET"])
def gynecology():
    return render_template("site/department.html", **department_context("gynecology"))
