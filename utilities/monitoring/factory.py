from typing import Optional
from .logger import MonitoringService
from utilities.validators.config_validator import MonitoringConfig

class MonitoringFactory:
    _instance: Optional[MonitoringService] = None

    @classmethod
    def get_monitoring_service(cls, app_name: str = "repcount", log_dir: Optional[str] = None) -> MonitoringService:
        if not cls._instance:
            settings = MonitoringConfig()
            cls._instance = MonitoringService(
                app_name,
                log_dir=log_dir or settings.LOG_DIR,
                metrics_dir=settings.METRICS_DIR,
                log_level=settings.LOG_LEVEL,
                enable_system_metrics=settings.ENABLE_METRICS,
                metrics_interval=settings.METRICS_INTERVAL
            )
        return cls._instance

    @classmethod
    def get_logger(cls, module_name: str, app_name: str = "repcount", log_dir: Optional[str] = None):
        monitoring_service = cls.get_monitoring_service(app_name, log_dir)
        return monitoring_service.get_logger(module_name)
