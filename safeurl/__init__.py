"""
Root module of the library. This module re-exports the most commonly
used types to reduce the verbosity of the imports statements.
"""

__version__ = "1.0.0"

from .exceptions import DEFAULT_DATA_PATH as DEFAULT_DATA_PATH
from .exceptions import InvalidIpPort as InvalidIpPort
from .exceptions import InvalidURLData as InvalidURLData
from .exceptions import SafeURLError as SafeURLError
from .href import make_href as make_href
from .hrefdata import is_absolute_href_data as is_absolute_href_data
from .hrefdata import is_hash_href_data as is_hash_href_data
from .hrefdata import is_path_href_data as is_path_href_data
from .hrefdata import is_pr_href_data as is_pr_href_data
from .hrefdata import is_search_href_data as is_search_href_data
from .parsed import ParsedURL as ParsedURL
from .parts import HostnameHRefParts as HostnameHRefParts
from .parts import HRefParts as HRefParts
from .parts import PRHRefParts as PRHRefParts
from .parts import RelativeHRefParts as RelativeHRefParts
from .parts import href_parts_from_mapping as href_parts_from_mapping
from .parts import is_href_parts_with_hostname as is_href_parts_with_hostname
from .parts import is_href_parts_with_pathname as is_href_parts_with_pathname
from .parts import is_pr_href_parts as is_pr_href_parts
from .ports import IpPort as IpPort
from .ports import ip_port_to_string as ip_port_to_string
from .ports import make_ip_port as make_ip_port
from .url import URL as URL
from .validation import is_url_data as is_url_data
from .validation import make_url as make_url
from .validation import must_be_url_data as must_be_url_data
from .validation import raise_error as raise_error
from .validation import validate_url_data as validate_url_data
