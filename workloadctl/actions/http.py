import requests, urllib3

from ..errors import TransportError
from ..models import Settings
from ..utils import LOG

def session_for(settings: Settings) -> requests.Session:
    s = requests.Session()
    s.headers["Authorization"] = f"Bearer {settings.token}"
    s.verify = settings.verify
    if settings.verify is False:
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
        LOG.warning("TLS verification disabled for %s", settings.api)
    return s

def send(session, method:str, url:str, timeout, body:str|None=None, content_type:str|None=None, params=None):
    headers = {}
    if content_type: headers["Content-Type"] = content_type
    LOG.info("%s %s", method, url)
    try:
        r = session.request(method, url, data=body, headers=headers, params=params, timeout=timeout)
    except requests.RequestException as e:
        raise TransportError(method, url, e) from e
    return r.status_code, r.text
