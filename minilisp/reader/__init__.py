from minilisp.reader.parser import tokenize, read, parse, parse_all

__all__ = ["tokenize", "read", "parse", "parse_all"]
