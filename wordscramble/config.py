import os

from .word_list import DEFAULT_WORD_LIST_PATH


class Config:
    WORD_LIST_PATH = os.environ.get('WORD_LIST_PATH') or str(DEFAULT_WORD_LIST_PATH)
    # 'wordfreq' or 'wordset' (the latter needs DICTIONARY_PATH)
    DICTIONARY_BACKEND = os.environ.get('DICTIONARY_BACKEND', 'wordfreq')
    DICTIONARY_PATH = os.environ.get('DICTIONARY_PATH')
    DICTIONARY_LOCALE = os.environ.get('DICTIONARY_LOCALE', 'en')
    WORDFREQ_MIN_ZIPF = float(os.environ.get('WORDFREQ_MIN_ZIPF', '1.0'))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    CORS_ORIGINS = [o.strip() for o in os.environ.get('CORS_ORIGINS', '*').split(',') if o.strip()]
