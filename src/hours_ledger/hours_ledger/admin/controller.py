from __future__ import annotations

from functools import wraps

from flask import Flask, jsonify, request

from ..container import Container
from ..core.enums import AdminAction
from ..core.exceptions import AuthorizationError
from ..common.http import result_response
from ..events import AdminCommand
from ..prompts.prompter import MappingPrompter


def register(app: Flask, container: Container) -> None:
    editors = container.config.editors

    def check_editor(editor: str) -> None:
        if not editor or not any(fragment in editor for fragment in editors):
            raise AuthorizationError(f"{editor or 'anonymous'} is not an editor")

    def editor_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                check_editor(request.headers.get("X-Editor", "").strip())
            except AuthorizationError as e:
                return jsonify({"success": False, "message": str(e)}), 403
            return view(*args, **kwargs)

        return wrapper

    @app.post("/admin/<command>")
    @editor_required
    def admin_command(command: str):
        try:
            action = AdminAction(command)
        except ValueError:
            return jsonify({"success": False, "message": f"Unknown command: {command}"}), 404

        answers = request.get_json(silent=True) or {}
        result = container.dispatcher.dispatch(AdminCommand(action=action, prompter=MappingPrompter(answers)))
        receipt = result.value
        return result_response(result, action=action.value, addresses=receipt.addresses if receipt else [])
