import logging
import os
import time

logger = logging.getLogger(__name__)

URL_PREFIX = '/faculty_uploadss'


class PhotoStorage:
    """Writes uploaded photos to a local directory under generated names.

    Stored files are referenced by their URL path, e.g.
    ``/faculty_uploadss/1718123456789.jpg``. The name is the upload time in
    epoch milliseconds plus the original extension; a name that is already
    taken is bumped one millisecond at a time until a free one is found.
    """

    def __init__(self, upload_dir, url_prefix=URL_PREFIX, clock=None):
        self.upload_dir = os.path.abspath(upload_dir)
        self.url_prefix = url_prefix.rstrip('/')
        self._clock = clock or time.time
        os.makedirs(self.upload_dir, exist_ok=True)

    def _stamp(self):
        return int(self._clock() * 1000)

    def save(self, file):
        """Store ``file`` (a werkzeug FileStorage) and return its URL path.

        Returns None when no file was sent, including the empty part a
        browser submits for an untouched file input.
        """
        if file is None or not file.filename:
            return None
        ext = os.path.splitext(file.filename)[1]
        stamp = self._stamp()
        while True:
            filename = f"{stamp}{ext}"
            path = os.path.join(self.upload_dir, filename)
            try:
                fh = open(path, 'xb')
            except FileExistsError:
                stamp += 1
                continue
            try:
                with fh:
                    file.save(fh)
            except Exception:
                # nothing references a partial write
                os.remove(path)
                raise
            logger.info("Stored upload %s as %s", file.filename, filename)
            return f"{self.url_prefix}/{filename}"

    def path_for(self, photo):
        # basename only, a stored path never points outside upload_dir
        return os.path.join(self.upload_dir, os.path.basename(photo))

    def delete(self, photo):
        """Best-effort removal of a stored photo; never raises."""
        if not photo:
            return False
        path = self.path_for(photo)
        if not os.path.exists(path):
            return False
        try:
            os.remove(path)
        except OSError as e:
            logger.warning("Could not delete photo %s: %s", path, e)
            return False
        logger.info("Deleted photo %s", path)
        return True
