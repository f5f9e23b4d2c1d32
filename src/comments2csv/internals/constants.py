"""Application-wide constants and configuration values."""

# Output filename base which is combined with a unique timestamp on save when the user
# did not pick an explicit destination.
OUTPUT_CSV_FILENAME = r"comments.csv"

# Default strftime format applied to parseable comment timestamps.
DEFAULT_DATE_FORMAT = "%m/%d/%Y"

# Reviewer shown when a presentation comment's authorId has no match in the author registry.
UNKNOWN_REVIEWER = "Unknown"

# Column headers, in output order, for each package family.
DOCX_COLUMNS: tuple[str, ...] = ("CommentID", "Page", "Comment", "Reviewer", "Date", "File")
PPTX_COLUMNS: tuple[str, ...] = ("CommentID", "Slide", "Comment", "Reviewer", "Date", "File")

# Package part locations (zip member paths, always forward slashes)
DOCX_COMMENTS_PART = "word/comments.xml"
PPTX_MODERN_AUTHORS_PART = "ppt/commentAuthors.xml"
PPTX_LEGACY_AUTHORS_PART = "ppt/authors.xml"
PPTX_COMMENTS_DIR = "ppt/comments"
PPTX_SLIDE_RELS_DIR = "ppt/slides/_rels"

# Prefix for per-run temporary expansion folders
TEMP_DIR_PREFIX = "comments2csv_"
