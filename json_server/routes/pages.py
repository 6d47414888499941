from flask import Blueprint, render_template

from ..extensions import get_resources
from ..web import success

bp = Blueprint("pages", __name__)


@bp.get("/")
def index():
    resources = get_resources()
    return render_template("index.html", stores=resources.stores)


@bp.get("/db")
def db():
    return success(get_resources().db.dump())
