from .base import ObjectStorage, StoredObject
from .supabase import SupabaseStorage

__all__ = ["ObjectStorage", "StoredObject", "SupabaseStorage"]
