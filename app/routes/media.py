from flask import Blueprint, jsonify
from app.services import get_services

media_bp = Blueprint('media', __name__)


@media_bp.route('/youtube/<path:location>')
def youtube_videos(location):
    """Travel-guide videos for a location; empty list when unavailable."""
    return jsonify(get_services().videos.search(location))


@media_bp.route('/maps/<path:location>')
def google_map(location):
    """Embeddable map for a location; ``map`` is null when unavailable."""
    return jsonify(get_services().maps.lookup(location))
