"""HTTP service exposing the event scheduling algorithms."""

from __future__ import annotations

import argparse
import json
import os
from pathlib import Path
from typing import Any, Callable, Mapping, Sequence

from flask import Flask, Response, request, send_from_directory

from .dsa.backtracking import BacktrackingScheduler
from .dsa.graph_coloring import GraphColoringScheduler
from .dsa.greedy_scheduler import GreedyScheduler
from .dsa.priority_queue import PriorityQueueScheduler
from .dsa.segment_tree import SegmentTreeScheduler
from .models import Event
from .scheduler import smart_schedule

DEFAULT_PORT = 8080
_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, GET, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
    "Access-Control-Allow-Credentials": "true",
}


def _as_int(value: Any) -> int:
    if isinstance(value, (bool, int, float)):
        return int(value)
    raise TypeError(f"expected a number, got {type(value).__name__}")


def _int_list(value: Any) -> list[int]:
    if not isinstance(value, list):
        raise TypeError("expected an array of numbers")
    return [_as_int(item) for item in value]


def _int_pairs(value: Any) -> list[tuple[int, int]]:
    if not isinstance(value, list):
        raise TypeError("expected an array of pairs")
    pairs = []
    for item in value:
        if not isinstance(item, list) or len(item) != 2:
            raise TypeError("expected a pair of two numbers")
        pairs.append((_as_int(item[0]), _as_int(item[1])))
    return pairs


def _conflict_map(value: Any) -> dict[int, list[int]]:
    """Accept either an object keyed by event id or an array of [event, conflicts] pairs."""
    if isinstance(value, Mapping):
        return {int(key): _int_list(others) for key, others in value.items()}
    if isinstance(value, list):
        result: dict[int, list[int]] = {}
        for item in value:
            if not isinstance(item, list) or len(item) != 2:
                raise TypeError("expected [event, conflicts] pairs")
            result[_as_int(item[0])] = _int_list(item[1])
        return result
    raise TypeError("expected an object of conflicts")


def _field(body: Any, name: str) -> Any:
    if not isinstance(body, Mapping):
        raise TypeError("request body must be a JSON object")
    if name not in body:
        raise KeyError(name)
    return body[name]


def _slot_pairs(slots: Mapping[int, int]) -> list[list[int]]:
    return [[event, slot] for event, slot in sorted(slots.items())]


def _json_response(payload: Any) -> Response:
    text = json.dumps(payload, indent=4, sort_keys=True, ensure_ascii=False)
    return Response(text, status=200, mimetype="application/json")


def _read_body() -> Any:
    return json.loads(request.get_data(as_text=True))


def _algorithm_view(handler: Callable[[Any], Any]) -> Callable[[], Response]:
    def view() -> Response:
        if request.method == "OPTIONS":
            return Response(status=200)
        try:
            payload = handler(_read_body())
        except (ValueError, KeyError, TypeError, IndexError):
            return Response(status=500)
        return _json_response(payload)

    return view


def _graph_coloring(body: Any) -> dict[str, Any]:
    scheduler = GraphColoringScheduler(_int_pairs(_field(body, "event_conflicts")))
    return {"event_slots": _slot_pairs(scheduler.assign_slots())}


def _backtracking(body: Any) -> dict[str, Any]:
    events = _int_list(_field(body, "events"))
    conflicts = _conflict_map(_field(body, "conflicts"))
    return {"event_slots": _slot_pairs(BacktrackingScheduler(events, conflicts).get_schedule())}


def _greedy(body: Any) -> dict[str, Any]:
    events = _int_list(_field(body, "events"))
    conflicts = _conflict_map(_field(body, "conflicts"))
    return {"event_slots": _slot_pairs(GreedyScheduler(events, conflicts).assign_slots())}


def _priority_queue(body: Any) -> dict[str, Any]:
    scheduler = PriorityQueueScheduler(_conflict_map(_field(body, "event_conflicts")))
    return {"event_slots": _slot_pairs(scheduler.assign_slots())}


def _segment_tree(body: Any) -> dict[str, Any]:
    scheduler = SegmentTreeScheduler(_int_list(_field(body, "array")))
    return {"segment_tree": list(scheduler.tree)}


def create_app(static_dir: str | os.PathLike[str] | None = None) -> Flask:
    """Build the web application, serving static files from ``static_dir``."""
    static_root = Path(static_dir if static_dir is not None else "static").resolve()
    app = Flask(__name__, static_folder=None)

    @app.after_request
    def add_cors_headers(response: Response) -> Response:
        for name, value in _CORS_HEADERS.items():
            response.headers.setdefault(name, value)
        return response

    @app.route("/")
    def index() -> Response:
        return send_from_directory(static_root, "index.html")

    @app.route("/static/<filename>")
    def static_file(filename: str) -> Response:
        return send_from_directory(static_root, filename)

    routes: Sequence[tuple[str, str, Callable[[Any], Any]]] = (
        ("/assign_slots/graph_coloring/", "graph_coloring", _graph_coloring),
        ("/assign_slots/backtracking/", "backtracking", _backtracking),
        ("/assign_slots/greedy/", "greedy", _greedy),
        ("/assign_slots/priority_queue/", "priority_queue", _priority_queue),
        ("/assign_slots/segment_tree/", "segment_tree", _segment_tree),
    )
    for rule, endpoint, handler in routes:
        app.add_url_rule(
            rule,
            endpoint=endpoint,
            view_func=_algorithm_view(handler),
            methods=["POST", "OPTIONS"],
            provide_automatic_options=False,
        )

    @app.route("/schedule_events/", methods=["POST", "OPTIONS"], provide_automatic_options=False)
    def schedule_events() -> Response:
        if request.method == "OPTIONS":
            return Response(status=200)
        try:
            raw_events = _field(_read_body(), "events")
            if not isinstance(raw_events, list):
                raise TypeError("'events' must be an array")
            events = [Event.from_dict(item) for item in raw_events]
            scheduled = smart_schedule(events)
        except (ValueError, KeyError, TypeError) as exc:
            message = exc.args[0] if isinstance(exc, KeyError) and exc.args else exc
            return Response(f"Error: {message}", status=400)
        return _json_response({"scheduled_events": [event.to_dict() for event in scheduled]})

    return app


def main(argv: Sequence[str] | None = None) -> int:
    """Run the scheduling service."""
    parser = argparse.ArgumentParser(description="Event scheduling web service.")
    parser.add_argument("--host", default="0.0.0.0", help="address to bind")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    parser.add_argument("--static-dir", default="static", help="directory of static files")
    args = parser.parse_args(argv)

    print(f"Current working directory: {Path.cwd()}")
    app = create_app(args.static_dir)
    app.run(host=args.host, port=args.port, threaded=True)
    return 0