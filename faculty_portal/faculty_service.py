import logging

from .errors import NotFound

logger = logging.getLogger(__name__)


class FacultyService:
    """Faculty profile CRUD plus the photo file that goes with each record."""

    def __init__(self, store, photos):
        self.store = store
        self.photos = photos

    def create(self, fields, photo_file=None):
        photo = self.photos.save(photo_file)
        try:
            faculty = self.store.insert(fields, photo=photo or '')
        except Exception:
            if photo:
                self.photos.delete(photo)
            raise
        logger.info("Created faculty %s", faculty.id)
        return faculty

    def list(self):
        return self.store.list_summaries()

    def get(self, faculty_id):
        faculty = self.store.get(faculty_id)
        if faculty is None:
            raise NotFound()
        return faculty

    def update(self, faculty_id, fields, photo_file=None):
        """Overwrite every text field and, if a file came in, the photo.

        Fields missing from ``fields`` are stored as null; the photo is only
        touched when a new file is supplied, in which case the old file is
        removed from disk.
        """
        faculty = self.get(faculty_id)
        old_photo = faculty.photo
        photo = self.photos.save(photo_file)
        try:
            faculty = self.store.update(faculty, fields, photo=photo)
        except Exception:
            if photo:
                self.photos.delete(photo)
            raise
        if photo and old_photo:
            self.photos.delete(old_photo)
        logger.info("Updated faculty %s", faculty_id)
        return faculty

    def delete(self, faculty_id):
        record = self.store.delete(faculty_id)
        if record is None:
            raise NotFound()
        if record["photo"]:
            self.photos.delete(record["photo"])
        logger.info("Deleted faculty %s", faculty_id)
        return record
