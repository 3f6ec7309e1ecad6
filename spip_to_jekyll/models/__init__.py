from .import_options import ImportOptions, resolve_options
from .jekyll_post import JekyllAuthor, JekyllComment, JekyllFrontMatter, published_flag

__all__ = [
    "ImportOptions",
    "resolve_options",
    "JekyllAuthor",
    "JekyllComment",
    "JekyllFrontMatter",
    "published_flag",
]
