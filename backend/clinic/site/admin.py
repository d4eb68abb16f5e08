# clinic/site/admin.py
from flask import render_template, request, redirect, url_for, flash, g
from clinic.resources import RESOURCES
from clinic.resources.holidays import HolidaysResource
from clinic.utils.decorators import admin_required
from . import site_bp


@site_bp.route("/admin", methods=["GET", "POST"])
def admin_login():
    if request.method == "GET":
        if g.admin_session.is_authenticated:
            return redirect(url_for("site.admin_dashboard"))
        return render_template("site/admin_login.html")

    username = request.form.get("username", "")
    password = request.form.get("password", "")

    if not g.admin_session.login(username, password):
        flash("Invalid username or password", "error")
        return render_template("site/admin_login.html", username=username), 401

    return redirect(url_for("site.admin_dashboard"))


@site_bp.route("/admin/logout", methods=["POST"])
def admin_logout():
    g.admin_session.logout()
    flash("You have been logged out", "info")
    return redirect(url_for("site.admin_login"))


@site_bp.route("/admin/dashboard", methods=["GET"])
@admin_required
def admin_dashboard():
    holidays = HolidaysResource().fetch()
    return render_template(
        "site/dashboard.html",
        username=g.admin_session.username,
        content_types=sorted(RESOURCES),
        holidays=holidays.data or [],
    )
