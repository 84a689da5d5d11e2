"""JSON endpoints shaped after the platform's REST API.

The namespace segment accepts the configured namespace or ``_`` (the
caller's default namespace). Failed blocking invocations answer 502, as
the platform does for action errors.
"""

from __future__ import annotations

from flask import Blueprint, abort, current_app, jsonify, request

from wsk_fixtures.serializers import action_to_detail, action_to_summary, activation_to_dict


def _truthy_arg(name: str) -> bool:
    return request.args.get(name, "false").lower() == "true"


def _check_namespace(namespace: str) -> str:
    settings = current_app.extensions["wsk_fixtures"]["settings"]
    if namespace not in ("_", settings.namespace):
        abort(404)
    return settings.namespace


def register_api_routes(bp: Blueprint) -> None:

    @bp.errorhandler(404)
    def not_found(e):
        return jsonify({"error": "The requested resource does not exist."}), 404

    @bp.route("/namespaces/<namespace>/actions")
    def list_actions(namespace: str):
        namespace = _check_namespace(namespace)
        registry = current_app.extensions["wsk_fixtures"]["registry"]
        return jsonify([action_to_summary(d, namespace) for _, d in registry.iter()])

    @bp.route("/namespaces/<namespace>/actions/<path:name>")
    def get_action(namespace: str, name: str):
        namespace = _check_namespace(namespace)
        registry = current_app.extensions["wsk_fixtures"]["registry"]
        descriptor = registry.get(name)
        if descriptor is None:
            return jsonify({"error": f"Action '{name}' not found"}), 404
        return jsonify(action_to_detail(descriptor, namespace))

    @bp.route("/namespaces/<namespace>/actions/<path:name>", methods=["POST"])
    def invoke_action(namespace: str, name: str):
        _check_namespace(namespace)

        from wsk_fixtures.errors import ActionNotFoundError
        from wsk_fixtures.registry import get_invoker

        params = request.get_json(silent=True)
        if params is None:
            params = {}
        if not isinstance(params, dict):
            return jsonify({"error": "The request content was malformed: expected a JSON object."}), 400

        try:
            activation = get_invoker().invoke(name, params)
        except ActionNotFoundError:
            return jsonify({"error": f"Action '{name}' not found"}), 404

        if not _truthy_arg("blocking"):
            return jsonify({"activationId": activation.activation_id}), 202

        status_code = 200 if activation.success else 502
        if _truthy_arg("result"):
            return jsonify(activation.result), status_code
        return jsonify(activation_to_dict(activation)), status_code

    @bp.route("/namespaces/<namespace>/activations")
    def list_activations(namespace: str):
        _check_namespace(namespace)
        store = current_app.extensions["wsk_fixtures"]["activations"]
        raw_limit = request.args.get("limit")
        limit = None
        if raw_limit is not None:
            if not raw_limit.isdigit() or int(raw_limit) < 1:
                return jsonify({"error": f"limit must be a positive integer. Got: '{raw_limit}'"}), 400
            limit = int(raw_limit)
        name = request.args.get("name")
        return jsonify([activation_to_dict(a) for a in store.list(limit=limit, name=name)])

    @bp.route("/namespaces/<namespace>/activations/<activation_id>")
    def get_activation(namespace: str, activation_id: str):
        _check_namespace(namespace)
        store = current_app.extensions["wsk_fixtures"]["activations"]
        activation = store.get(activation_id)
        if activation is None:
            return jsonify({"error": f"Activation '{activation_id}' not found"}), 404
        return jsonify(activation_to_dict(activation))
