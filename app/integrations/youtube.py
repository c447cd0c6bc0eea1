import logging
from app.errors import UpstreamError

logger = logging.getLogger(__name__)

YOUTUBE_SEARCH_URL = 'https://www.googleapis.com/youtube/v3/search'
WATCH_URL = 'https://www.youtube.com/watch?v={video_id}'
MAX_RESULTS = 5


class VideoSearchService:
    def __init__(self, upstream, api_key):
        self.upstream = upstream
        self.api_key = api_key

    def search(self, location):
        """Travel-guide videos for a location. Never raises; degrades to an empty list."""
        if not self.api_key:
            return {'videos': [], 'message': 'YouTube API key not configured'}

        try:
            data = self.upstream.get(YOUTUBE_SEARCH_URL, params={
                'part': 'snippet',
                'q': f'{location} travel guide',
                'type': 'video',
                'maxResults': MAX_RESULTS,
                'key': self.api_key,
            })
            videos = [_to_video(item) for item in data['items']]
        except (UpstreamError, KeyError, TypeError) as e:
            logger.warning(f"Video search failed for {location!r}: {e}")
            return {'videos': [], 'error': 'Failed to fetch YouTube videos'}

        return {'videos': videos}


def _to_video(item):
    video_id = item['id']['videoId']
    return {
        'id': video_id,
        'title': item['snippet']['title'],
        'thumbnail': item['snippet']['thumbnails']['medium']['url'],
        'url': WATCH_URL.format(video_id=video_id),
    }
