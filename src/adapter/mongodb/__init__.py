from adapter.mongodb.connection import DATABASE_NAME, WORDS_COLLECTION_NAME

__all__ = ['DATABASE_NAME', 'WORDS_COLLECTION_NAME']
