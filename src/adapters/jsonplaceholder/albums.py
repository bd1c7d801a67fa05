"""Albums and photos."""

from __future__ import annotations

import logging

from adapters.jsonplaceholder.base import Resource
from core.domain.models import Album, Photo

logger = logging.getLogger(__name__)


class AlbumsApi(Resource):
    async def get_all_albums(self) -> list[Album]:
        logger.info("Fetching all albums...")
        albums = await self._get_many(Album, "albums")
        logger.info("Retrieved %d albums", len(albums))
        return albums

    async def get_album(self, album_id: int) -> Album:
        logger.info("Fetching album %s...", album_id)
        album = await self._get_one(Album, "albums", album_id)
        logger.info('Retrieved album: "%s"', album.title)
        return album

    async def get_album_photos(self, album_id: int) -> list[Photo]:
        logger.info("Fetching photos from album %s...", album_id)
        photos = await self._get_many(Photo, "albums", album_id, "photos")
        logger.info("Found %d photos in album %s", len(photos), album_id)
        return photos


class PhotosApi(Resource):
    async def get_all_photos(self) -> list[Photo]:
        logger.info("Fetching all photos...")
        photos = await self._get_many(Photo, "photos")
        logger.info("Retrieved %d photos", len(photos))
        return photos
