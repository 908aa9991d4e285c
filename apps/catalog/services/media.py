from typing import Optional

from apps.catalog.models import Media


class MediaService:
    """
    Builds public URLs for uploaded media.
    When a request is given, URLs are absolute.
    """

    def __init__(self, request=None):
        self.request = request

    def _absolute(self, url):
        if url and self.request is not None:
            return self.request.build_absolute_uri(url)
        return url

    def get_media_url(self, media: Optional[Media]) -> Optional[str]:
        if media is None or not media.file:
            return None
        return self._absolute(media.file.url)

    def get_thumbnail_url(self, media: Optional[Media]) -> Optional[str]:
        """Thumbnail of an image; other media types have no thumbnail."""
        if media is None or not media.file or not media.is_image:
            return None
        return self._absolute(media.thumbnail.url)
