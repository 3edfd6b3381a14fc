from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Student Management System"

    # Storage settings
    data_file: str = "students.json"

    # Application settings
    log_dir: str = "logs"
    log_level: str = "WARNING"
    activity_log: bool = True
    use_color: bool = True

    class Config:
        env_file = ".env"
        env_prefix = "ROSTER_"
        case_sensitive = False


settings = Settings()
