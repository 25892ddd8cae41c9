import os

from flask import Flask, jsonify, render_template, request

from local_info import ProviderConfig, load_local_info
from local_info.config import DEFAULT_PORT

app = Flask(__name__)
app.config["PROVIDERS"] = ProviderConfig.from_env()


def build_view(path: str):
    """Run the clock + weather lookups for *path* and tear the clock down."""
    app.logger.info("Building local info view for %s", path)
    with load_local_info(path=path, config=app.config["PROVIDERS"]) as view:
        return view


def render_page(view):
    # The server-side clock stops with the request; the page keeps #time
    # going itself from the same flat offset.
    utc_offset = view.query.utc_offset_hours % 24 if view.query is not None else None
    return render_template(
        "local_info.html", display=view.display, state=view.state, utc_offset=utc_offset
    )


@app.route("/api/local_info/<path:subpath>")
def local_info_json(subpath):
    view = build_view("/" + subpath)
    payload = view.display.as_dict()
    payload["state"] = view.state
    return jsonify(payload)


@app.route("/clients/local_info/<zip_code>/<offset>")
def local_info(zip_code, offset):
    return render_page(build_view(request.path))


# Every other path serves the same page; without a ZIP/offset in the path
# it shows the missing-info error.
@app.route("/", defaults={"subpath": ""})
@app.route("/<path:subpath>")
def index(subpath):
    return render_page(build_view(request.path))


if __name__ == "__main__":
    # For development only – use a proper WSGI server in production
    app.run(debug=True, host="0.0.0.0", port=int(os.environ.get("PORT", DEFAULT_PORT)))
