"""Infrastructure layer — locating and tokenizing roster files.

The standard library ``csv`` module is the tokenizer. This layer owns file
handles; the domain layer only ever sees lists of string fields.
"""
