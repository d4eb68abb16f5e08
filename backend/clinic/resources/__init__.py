from .remote import Query, RemoteResource
from .registry import RESOURCES, build_resource
