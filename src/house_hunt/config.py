from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', extra='ignore', populate_by_name=True)

    # --- Realtor listings API (RapidAPI) ---
    # Sent as X-RapidAPI-Key. Unset means every request gets rejected upstream.
    REALTOR_API_KEY: str | None = Field(
        default=None,
        validation_alias=AliasChoices('realtorApiKey', 'REALTOR_API_KEY'),
    )
    REALTOR_LISTINGS_URL: str = 'https://realtor.p.rapidapi.com/properties/v3/list'
    REALTOR_API_HOST: str = 'realtor.p.rapidapi.com'
    HTTP_TIMEOUT_S: float = 20.0

    # false => one bad list_date fails the whole area with DateFormatFailed
    SKIP_UNPARSABLE_DATES: bool = True

    LOG_LEVEL: str = 'WARNING'


settings = Settings()
