"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DAYS = 7
DEFAULT_REVIEW_LIMIT = 50
DEFAULT_PLACEHOLDER_NIS_PREFIX = "SIS"
DEFAULT_NEW_STUDENT_NAME = "Siswa Baru"
DEFAULT_NEW_PROFILE_NAME = "Pengguna Baru"
NOT_LINKED_MESSAGE = "Data siswa belum terhubung, silakan hubungi administrator sekolah"
