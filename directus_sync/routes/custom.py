from flask import Blueprint

bp = Blueprint("custom", __name__)


@bp.get("/custom")
def custom_get():
    return {"message": "[GET] Hello world!"}, 200


@bp.post("/custom")
def custom_post():
    return {"message": "[POST] Hello world!"}, 200
