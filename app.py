import logging

from flask import Flask, request, jsonify, current_app
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from config.settings import CORS_ORIGIN, DB_PATH, PORT
from services.store import JsonFileStore
from services.user_auth_store import check_credentials, create_user
from services.user_profile_store import save_profile, OPTIONAL_FIELDS
from utils.exceptions import InputError, StoreError
from utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config["STORE"] = JsonFileStore(DB_PATH)
CORS(
    app,
    origins=[CORS_ORIGIN],
    methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)


@app.before_request
def answer_preflight():
    # Every OPTIONS request is answered before routing; CORS headers are added afterwards
    if request.method == "OPTIONS":
        return "", 200


def _store():
    return current_app.config["STORE"]


def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _is_missing(value) -> bool:
    # Empty lists and objects count as present values
    if value is None or value is False or value == "":
        return True
    return type(value) in (int, float) and value == 0


def _require(data: dict, *fields):
    if any(_is_missing(data.get(f)) for f in fields):
        raise InputError("Missing required fields")


# -------------------------
# Error Handlers
# -------------------------
@app.errorhandler(InputError)
def input_error(e):
    return jsonify({"error": str(e)}), 400


@app.errorhandler(StoreError)
def store_error(e):
    logger.exception("Datastore failure")
    return jsonify({"error": "Server error"}), 500


@app.errorhandler(Exception)
def server_error(e):
    if isinstance(e, HTTPException):
        return e
    logger.exception("Unhandled error")
    return jsonify({"error": "Server error"}), 500


# -------------------------
# Signup
# -------------------------
@app.route("/api/signup", methods=["POST"])
def signup():
    data = _json_body()
    _require(data, "name", "roll", "email", "password")

    user = create_user(
        _store(),
        name=data["name"],
        roll=data["roll"],
        email=data["email"],
        password=data["password"],
    )

    return jsonify({
        "message": "User created",
        "userId": user["id"],
        "name": user["name"],
        "email": user["email"],
    }), 201


# -------------------------
# Login
# -------------------------
@app.route("/api/login", methods=["POST"])
def login():
    data = _json_body()
    user = check_credentials(_store(), data.get("email"), data.get("password"))

    return jsonify({
        "message": "Login success",
        "userId": user["id"],
        "name": user["name"],
        "email": user["email"],
    })


# -------------------------
# Role + Skills Profile
# -------------------------
@app.route("/api/profile", methods=["POST"])
def save_user_profile_route():
    data = _json_body()
    _require(data, "userId", "role", "skills")

    extra = {k: data[k] for k in OPTIONAL_FIELDS if k in data}
    save_profile(_store(), data["userId"], data["role"], data["skills"], extra)
    return jsonify({"message": "Profile saved"})


# -------------------------
# Run App
# -------------------------
if __name__ == "__main__":
    setup_logging()
    logger.info("BuddyUp backend running on http://localhost:%s", PORT)
    app.run(port=PORT, debug=False)
