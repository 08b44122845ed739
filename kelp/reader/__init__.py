from kelp.reader.parser import lex, TokenStream, read_str
