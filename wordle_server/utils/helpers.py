"""
Helper Functions

Contains utility functions used throughout the application.
"""

from flask import g, request


def get_player_id(request_obj=None, data=None) -> str:
    """
    Identify the player behind a request.

    An explicit player_id in the JSON body or query string wins; otherwise
    the client address is used. The result is kept on flask.g so log
    entries for the same request carry it.
    """
    if request_obj is None:
        request_obj = request

    body = data if isinstance(data, dict) else {}
    player_id = body.get('player_id') or request_obj.args.get('player_id')
    if isinstance(player_id, str) and player_id.strip():
        player_id = player_id.strip()
    else:
        player_id = request_obj.remote_addr or 'unknown'

    g.player_id = player_id
    return player_id
