"""
String Helper Functions
Laravel-style string manipulation utilities
"""
import re


class Str:
    """
    String manipulation helper class (Laravel-style)

    Provides static methods for the string operations the router needs:
    - classify (URI segment -> class / namespace name)
    - snake_case conversion
    - StudlyCase conversion
    """

    @staticmethod
    def snake(value: str, delimiter: str = '_') -> str:
        """
        Convert a string to snake_case

        Example:
            Str.snake('FrameworkApp')  # 'framework_app'
            Str.snake('frameworkApp')  # 'framework_app'
        """
        if not value:
            return value

        value = value.replace(' ', delimiter)

        # Insert delimiter before uppercase letters
        value = re.sub('(.)([A-Z][a-z]+)', r'\1' + delimiter + r'\2', value)
        value = re.sub('([a-z0-9])([A-Z])', r'\1' + delimiter + r'\2', value)

        value = value.lower()
        value = re.sub(f'{re.escape(delimiter)}+', delimiter, value)

        return value.strip(delimiter)

    @staticmethod
    def studly(value: str) -> str:
        """
        Convert a string to StudlyCase (PascalCase)

        Example:
            Str.studly('framework_app')  # 'FrameworkApp'
            Str.studly('framework app')  # 'FrameworkApp'
        """
        if not value:
            return value

        value = value.replace('_', ' ').replace('-', ' ')

        return ''.join(word.capitalize() for word in value.split())

    @staticmethod
    def classify(value: str) -> str:
        """
        Turn a URI segment into a class or namespace name

        Words separated by '_', '-' or spaces get an uppercase first letter;
        the remaining letters are left alone, so already-studly names survive.
        No singular/plural rewriting is done.

        Example:
            Str.classify('file_manager')  # 'FileManager'
            Str.classify('user-profile')  # 'UserProfile'
            Str.classify('FileManager')   # 'FileManager'
            Str.classify('clients')       # 'Clients'
        """
        if not value:
            return value

        value = value.replace('_', ' ').replace('-', ' ')

        return ''.join(word[:1].upper() + word[1:] for word in value.split())

    @staticmethod
    def ucfirst(value: str) -> str:
        """Uppercase the first character, leaving the rest untouched"""
        return value[:1].upper() + value[1:] if value else value

    @staticmethod
    def limit(value: str, limit: int = 100, end: str = '...') -> str:
        """
        Limit the number of characters in a string

        Example:
            Str.limit('Hello World', 5)  # 'Hello...'
        """
        if not value or len(value) <= limit:
            return value

        return value[:limit].rstrip() + end
