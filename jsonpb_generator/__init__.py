"""protoc plugin that attaches jsonpb-backed MarshalJSON/UnmarshalJSON to Go messages."""

__version__ = "0.1.0"
