"""Navigator Cookies Meta information.
   Navigator Cookies keeps cookie values confidential and tamper-proof
   through an encrypted child jar.
"""
__title__ = 'navigator_cookies'
__description__ = (
   'Navigator Cookies seals cookie values with authenticated encryption '
   'over an existing cookie jar.'
)
__version__ = '0.1.0'
__copyright__ = 'Copyright (c) 2023 Jesus Lara'
__author__ = 'Jesus Lara'
__author_email__ = 'jesuslarag@gmail.com'
__license__ = 'Apache-2.0'
__url__ = 'https://github.com/phenobarbital/navigator-cookies'
