from .sources.sample_source import SampleConfig
from .sources.catalog_source import CatalogConfig

AppConfig = SampleConfig | CatalogConfig
