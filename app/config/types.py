from .sources.example_source import ExampleConfig
from .sources.upload_source import UploadConfig

AppConfig = ExampleConfig | UploadConfig
