#!/usr/bin/env python3
"""
Built-in ignore and suppress tables for URL reachability checks.

Both tables are ordered lists of ``[prefix, reason]`` pairs so they can be
stored in (and overridden by) JSON configuration files.

- Ignored prefixes are never probed.
- Suppressed prefixes are probed, but failures are downgraded to warnings.
"""

from typing import Final, List

SUPPRESSED_BECAUSE_403: Final[str] = "may trigger a 403 Forbidden or a redirection forbidden"
SUPPRESSED_BECAUSE_502: Final[str] = "may return a 502 Bad Gateway"
SUPPRESSED_BECAUSE_503: Final[str] = "may return a 503 Service Unavailable"
SUPPRESSED_BECAUSE_TIMEOUT: Final[str] = "may trigger an open or read timeout"
SUPPRESSED_BECAUSE_EOF: Final[str] = 'may return an "unexpected eof while reading" error'
SUPPRESSED_BECAUSE_CERT: Final[str] = "site have an invalid certificate"
SUPPRESSED_BECAUSE_UNAVAILABLE: Final[str] = "site is temporary unavailable"

IGNORED_URL_PREFIXES: Final[List[List[str]]] = [
    ["https://www.nokia.com", "always return a Net::ReadTimeout"],
]

SUPPRESSED_URL_PREFIXES: Final[List[List[str]]] = [
    ["https://ark.intel.com", SUPPRESSED_BECAUSE_403],
    ["https://azure.microsoft.com", SUPPRESSED_BECAUSE_TIMEOUT],
    ["https://business.adobe.com", SUPPRESSED_BECAUSE_TIMEOUT],
    ["https://blogs.oracle.com", SUPPRESSED_BECAUSE_TIMEOUT],
    ["https://codex.wordpress.org/Supported_Versions", SUPPRESSED_BECAUSE_EOF],
    ["https://dev.mysql.com", SUPPRESSED_BECAUSE_403],
    ["https://docs.clamav.net", SUPPRESSED_BECAUSE_403],
    ["https://docs-prv.pcisecuritystandards.org", SUPPRESSED_BECAUSE_403],
    ["https://dragonwell-jdk.io/", SUPPRESSED_BECAUSE_UNAVAILABLE],
    ["https://euro-linux.com", SUPPRESSED_BECAUSE_403],
    ["https://github.com/angular/angular.js/blob/v1.6.10/CHANGELOG.md", SUPPRESSED_BECAUSE_502],
    ["https://github.com/ansible-community/ansible-build-data/blob/main/4/CHANGELOG-v4.rst", SUPPRESSED_BECAUSE_502],
    ["https://github.com/nodejs/node/blob/main/doc/changelogs/", SUPPRESSED_BECAUSE_502],
    ["https://make.wordpress.org", SUPPRESSED_BECAUSE_EOF],
    ["https://mirrors.slackware.com", SUPPRESSED_BECAUSE_403],
    ["https://opensource.org/licenses/osl-3.0.php", SUPPRESSED_BECAUSE_403],
    ["https://reload4j.qos.ch/", SUPPRESSED_BECAUSE_TIMEOUT],
    ["https://support.azul.com", SUPPRESSED_BECAUSE_403],
    ["https://support.fairphone.com", SUPPRESSED_BECAUSE_403],
    ["https://web.archive.org", SUPPRESSED_BECAUSE_TIMEOUT],
    ["https://wiki.debian.org", SUPPRESSED_BECAUSE_TIMEOUT],
    ["https://wordpress.org", SUPPRESSED_BECAUSE_EOF],
    ["https://www.amazon.com/gp/help/customer/display.html", SUPPRESSED_BECAUSE_403],
    ["https://www.amazon.com/Kindle10Notes", SUPPRESSED_BECAUSE_503],
    ["https://www.amazon.com/Voyage7Notes", SUPPRESSED_BECAUSE_503],
    ["https://www.atlassian.com", SUPPRESSED_BECAUSE_TIMEOUT],
    ["https://www.adobe.com", SUPPRESSED_BECAUSE_TIMEOUT],
    ["https://www.citrix.com/products/citrix-virtual-apps-and-desktops/", SUPPRESSED_BECAUSE_403],
    ["https://www.clamav.net", SUPPRESSED_BECAUSE_403],
    ["https://www.drupal.org/", SUPPRESSED_BECAUSE_403],
    ["https://www.intel.com", SUPPRESSED_BECAUSE_403],
    ["https://www.java.com/releases/", SUPPRESSED_BECAUSE_TIMEOUT],
    ["https://www.microfocus.com/documentation/visual-cobol/", SUPPRESSED_BECAUSE_TIMEOUT],
    ["https://www.microsoft.com/download/internet-explorer.aspx", SUPPRESSED_BECAUSE_TIMEOUT],
    ["https://www.microsoft.com/edge", SUPPRESSED_BECAUSE_TIMEOUT],
    ["https://www.microsoft.com/windows", SUPPRESSED_BECAUSE_TIMEOUT],
    ["https://www.mysql.com", SUPPRESSED_BECAUSE_403],
    ["https://xenserver.org/", SUPPRESSED_BECAUSE_CERT],
]
