from datetime import timedelta

from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from hotel_booking_api.api.security import TokenAuthorizer
from hotel_booking_api.api.validation import FieldValidator
from hotel_booking_api.application import (
    CreateRoomUseCase,
    ListRoomsUseCase,
    LoginWithEmailAndPasswordUseCase,
    SignUpUseCase,
)
from hotel_booking_api.domain.ports import (
    AccessTokenCodec,
    CustomersGateway,
    PasswordHasher,
    RoomsRepository,
    SecretsGateway,
)
from hotel_booking_api.infrastructure.db.session import create_schema, create_session_factory
from hotel_booking_api.infrastructure.gateways import (
    AwsSecretsGateway,
    EnvironmentSecretsGateway,
    LocalSecretsGateway,
    SQLCustomersGateway,
)
from hotel_booking_api.infrastructure.repositories import SQLRoomsRepository
from hotel_booking_api.infrastructure.security import BcryptPasswordHasher, JoseAccessTokenCodec
from hotel_booking_api.shared.config.settings import Settings, settings
from hotel_booking_api.shared.logging import AuditLogger

DATABASE_URL_SECRET_KEY = "POSTGRES_URL"


class ApplicationContainer:
    """Dependency container for gateways, validator, authorizer and use cases.

    Adapters can be injected (tests pass in-memory fakes); anything left out
    is built from settings. The database engine is only created when a SQL
    adapter is actually needed.
    """

    def __init__(
        self,
        app_settings: Settings = settings,
        session_factory: async_sessionmaker[AsyncSession] | None = None,
        secrets_gateway: SecretsGateway | None = None,
        customers_gateway: CustomersGateway | None = None,
        rooms_repository: RoomsRepository | None = None,
        password_hasher: PasswordHasher | None = None,
        token_codec: AccessTokenCodec | None = None,
        audit_logger: AuditLogger | None = None,
    ) -> None:
        self.settings = app_settings
        self._session_factory = session_factory
        self._customers_gateway = customers_gateway
        self._rooms_repository = rooms_repository
        self.secrets_gateway = secrets_gateway or self._build_secrets_gateway()
        self.password_hasher = password_hasher or BcryptPasswordHasher(
            rounds=app_settings.password_hash_rounds
        )
        self.token_codec = token_codec or JoseAccessTokenCodec(algorithm=app_settings.jwt_algorithm)
        self.audit_logger = audit_logger or AuditLogger()
        self.field_validator = FieldValidator()
        self.token_authorizer = TokenAuthorizer(
            secrets_gateway=self.secrets_gateway,
            token_codec=self.token_codec,
        )

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        if self._session_factory is None:
            self._session_factory = create_session_factory(self.settings)
        return self._session_factory

    @property
    def uses_database(self) -> bool:
        return self._customers_gateway is None or self._rooms_repository is None

    async def startup(self) -> None:
        """Resolve the database URL and create tables when configured to."""
        if not self.uses_database:
            return
        if self._session_factory is None and self.settings.database_url_from_secrets:
            database_url = await self.secrets_gateway.get(DATABASE_URL_SECRET_KEY)
            self._session_factory = create_session_factory(self.settings, database_url)
        if self.settings.db_create_schema:
            engine = self.session_factory.kw["bind"]
            await create_schema(engine)

    async def shutdown(self) -> None:
        """Dispose the database engine if one was created."""
        if self._session_factory is None:
            return
        engine = self._session_factory.kw.get("bind")
        if engine is not None:
            await engine.dispose()

    def create_customers_gateway(self) -> CustomersGateway:
        if self._customers_gateway is not None:
            return self._customers_gateway
        return SQLCustomersGateway(self.session_factory)

    def create_rooms_repository(self) -> RoomsRepository:
        if self._rooms_repository is not None:
            return self._rooms_repository
        return SQLRoomsRepository(self.session_factory)

    def create_sign_up_use_case(self) -> SignUpUseCase:
        return SignUpUseCase(
            customers_gateway=self.create_customers_gateway(),
            password_hasher=self.password_hasher,
            audit_logger=self.audit_logger,
        )

    def create_login_with_email_and_password_use_case(self) -> LoginWithEmailAndPasswordUseCase:
        return LoginWithEmailAndPasswordUseCase(
            customers_gateway=self.create_customers_gateway(),
            secrets_gateway=self.secrets_gateway,
            password_hasher=self.password_hasher,
            token_codec=self.token_codec,
            audit_logger=self.audit_logger,
            token_ttl=timedelta(days=self.settings.access_token_ttl_days),
        )

    def create_create_room_use_case(self) -> CreateRoomUseCase:
        return CreateRoomUseCase(
            rooms_repository=self.create_rooms_repository(),
            audit_logger=self.audit_logger,
        )

    def create_list_rooms_use_case(self) -> ListRoomsUseCase:
        return ListRoomsUseCase(rooms_repository=self.create_rooms_repository())

    def _build_secrets_gateway(self) -> SecretsGateway:
        if self.settings.secrets_provider == "env":
            return EnvironmentSecretsGateway()
        if self.settings.secrets_provider == "aws":
            return AwsSecretsGateway(
                secret_name=self.settings.aws_secret_name,
                region_name=self.settings.aws_region,
            )
        return LocalSecretsGateway(self.settings.secrets_file_path)
