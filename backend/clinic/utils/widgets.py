# clinic/utils/widgets.py
from flask import current_app, g
from markupsafe import Markup, escape
from .device import MOBILE, TABLET


def widget_height(device_type, max_height=None):
    if max_height:
        return max_height
    if device_type == MOBILE:
        return 300
    if device_type == TABLET:
        return 400
    return 500


class WidgetLoader:
    """
    Renders third-party review widgets into a page.

    The platform script is emitted with the first widget only; later
    widgets on the same document reuse it.
    """

    def __init__(self, script_url, device_type=None):
        self.script_url = script_url
        self.device_type = device_type
        self.script_loaded = False

    def script_tag(self):
        if self.script_loaded:
            return Markup("")
        self.script_loaded = True
        return Markup('<script src="{}" async></script>').format(self.script_url)

    def widget(self, app_id, class_name="", max_height=None):
        if not app_id:
            return Markup("")
        height = widget_height(self.device_type, max_height)
        container = Markup(
            '<div class="elfsight-app-{} {} w-full" data-elfsight-app-lazy '
            'style="min-height: {}px; max-width: 100%; overflow: hidden"></div>'
        ).format(escape(app_id), escape(class_name), height)
        return self.script_tag() + container

    def reinit_script(self):
        return Markup(
            "<script>window.elfsight && window.elfsight.reinstall();</script>"
        )


def get_widget_loader():
    """The loader for the current request's document."""
    loader = g.get("widget_loader")
    if loader is None:
        loader = WidgetLoader(
            current_app.config["ELFSIGHT_SCRIPT_URL"],
            device_type=g.get("device_type"),
        )
        g.widget_loader = loader
    return loader
