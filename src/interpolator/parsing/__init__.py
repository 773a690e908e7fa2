from .tokenizer import PlaceholderTokenizer

__all__ = ['PlaceholderTokenizer']
