"""Constants for the section CMS"""

# ==================== File Paths ====================
DATABASE_FILENAME = "sectioncms.db"
LOG_FILENAME = "sectioncms.log"
LOG_FILE_DEFAULT = "data/sectioncms.log"

# ==================== Document Paths ====================
DATA_ROOT = "data"

# ==================== Schema Limits ====================
MAX_UNWRAP_DEPTH = 64  # wrappers around a single node
MAX_MODEL_DEPTH = 16  # nested models before recursion is cut

# ==================== Media Buckets ====================
BUCKET_HERO_IMAGES = "hero-images"
BUCKET_COUPLE_PHOTOS = "couple-photos"
BUCKET_APP_SCREENSHOTS = "app-screenshots"
BUCKET_BLOG_IMAGES = "blog-images"
DEFAULT_BUCKET = BUCKET_HERO_IMAGES

SECTION_BUCKETS = {
    "hero": BUCKET_HERO_IMAGES,
    "how-it-works": BUCKET_HERO_IMAGES,
    "gallery": BUCKET_COUPLE_PHOTOS,
    "app-download": BUCKET_APP_SCREENSHOTS,
    "coming-soon": BUCKET_APP_SCREENSHOTS,
    "blog-post": BUCKET_BLOG_IMAGES,
}

KNOWN_BUCKETS = (
    BUCKET_HERO_IMAGES,
    BUCKET_BLOG_IMAGES,
    BUCKET_COUPLE_PHOTOS,
    BUCKET_APP_SCREENSHOTS,
    "user-uploads",
    "brand-assets",
)

MAX_IMAGE_LIST_ITEMS = 20

# ==================== Classification Keywords ====================
IMAGE_KEYWORDS = ("image",)
IMAGE_LIST_KEYWORDS = ("image", "screenshot", "gallery", "photo")
COUPLE_PHOTO_KEYWORDS = ("women", "men")
SCREENSHOT_KEYWORDS = ("screenshot",)
LINK_NAMES = ("href", "url", "link")
LINK_SUFFIXES = ("_link", "_url")
LONG_TEXT_KEYWORDS = ("content", "description", "excerpt", "answer")

ADVANCED_PREFIXES = ("show", "enable", "enabled", "is")
CTA_KEYWORDS = ("cta", "action", "button", "link", "url", "href", "submit")
MEDIA_KEYWORDS = ("image", "icon", "logo", "media", "screenshot", "photo", "background")

# ==================== Labels ====================
LABEL_OVERRIDES = {
    "cta": "Call to action",
    "href": "Link",
    "url": "URL",
    "link": "Link",
    "aria_label": "Accessibility label",
    "alt": "Alt text",
    "id": "ID",
    "order_index": "Order",
}

GROUP_TITLES = {
    "content": "Content",
    "call_to_action": "Call to action",
    "media": "Media",
    "advanced": "Advanced",
}

# ==================== Storage ====================
STORAGE_PUBLIC_PATH = "storage/v1/object/public"
HOME_PAGE_SLUG = "home"

# ==================== Database Configuration ====================
DB_MAX_CONNECTIONS = 20
DB_STALE_TIMEOUT = 300  # 5 minutes
DB_JOURNAL_MODE = "wal"
DB_SYNCHRONOUS = "NORMAL"
DB_BUSY_TIMEOUT = 5000  # 5 seconds
DB_CACHE_SIZE = -64 * 1000  # 64MB

# ==================== Database Pragmas ====================
DB_PRAGMAS = {
    "journal_mode": DB_JOURNAL_MODE,
    "synchronous": DB_SYNCHRONOUS,
    "busy_timeout": DB_BUSY_TIMEOUT,
    "foreign_keys": 1,
    "cache_size": DB_CACHE_SIZE,
}
