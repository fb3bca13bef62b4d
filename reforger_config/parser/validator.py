"""
Business rule validator for typed server configurations.

Checks run in a fixed order (hard errors by section, then warnings by
concern) and every finding is appended in that order. The validator keeps no
state between calls.
"""

import math

from ..logging_config import get_logger
from ..models.server import GameConfig, GameProperties, Mod, OperatingConfig, RconConfig, ServerConfig
from ..server.mods import get_effective_mod_name, is_valid_mod_id
from . import constants
from .issues import ParserError, ParserErrorType, ParserWarning, ParserWarningType, ValidationResult

logger = get_logger(__name__)


class Validator:
    """Inspect each configuration section and report typed errors and warnings."""

    def validate(self, config: ServerConfig) -> ValidationResult:
        """
        Validate a server configuration.

        Args:
            config: Structurally valid configuration

        Returns:
            ValidationResult with errors and warnings in check order
        """
        result = ValidationResult()

        self._check_rcon(config.rcon, result.errors)
        self._check_game(config.game, result.errors)
        self._check_game_properties(config.game.game_properties, result.errors)
        self._check_operating(config.operating, result.errors)

        self._warn_view_distances(config.game.game_properties, result.warnings)
        self._warn_player_count(config.game, result.warnings)
        self._warn_performance(config.game.game_properties, config.operating, result.warnings)
        self._warn_security(config.game, config.rcon, result.warnings)
        self._warn_mods(config.game.mods, result.warnings)
        self._warn_network(config, result.warnings)

        logger.debug(
            "Business rules evaluated",
            error_count=len(result.errors),
            warning_count=len(result.warnings),
        )
        return result

    # Hard errors

    def _check_rcon(self, rcon: RconConfig, errors: list[ParserError]) -> None:
        # An empty password disables the remote console entirely
        if not rcon.password:
            return

        if len(rcon.password) < constants.PASSWORD_MINIMUM_LENGTH:
            errors.append(
                ParserError(
                    type=ParserErrorType.RCON_PASSWORD_TOO_SHORT,
                    message=(
                        f"RCON password must be at least {constants.PASSWORD_MINIMUM_LENGTH} characters long. "
                        f"Current length: {len(rcon.password)}"
                    ),
                    field="rcon.password",
                    value=len(rcon.password),
                    valid_range=f"{constants.PASSWORD_MINIMUM_LENGTH}+ characters",
                )
            )

        if " " in rcon.password:
            errors.append(
                ParserError(
                    type=ParserErrorType.RCON_PASSWORD_CONTAINS_SPACES,
                    message="RCON password cannot contain spaces",
                    field="rcon.password",
                    value=rcon.password,
                )
            )

        if rcon.permission and rcon.permission not in constants.RCON_PERMISSIONS:
            errors.append(
                ParserError(
                    type=ParserErrorType.RCON_INVALID_PERMISSION,
                    message=f"Invalid RCON permission: {rcon.permission}. Must be 'admin' or 'monitor'",
                    field="rcon.permission",
                    value=rcon.permission,
                    valid_range=" | ".join(constants.RCON_PERMISSIONS),
                )
            )

        if rcon.max_clients is not None and not (
            constants.RCON_MAX_CLIENTS_MINIMUM <= rcon.max_clients <= constants.RCON_MAX_CLIENTS_MAXIMUM
        ):
            errors.append(
                ParserError(
                    type=ParserErrorType.RCON_MAX_CLIENTS_OUT_OF_RANGE,
                    message=(
                        f"RCON maxClients must be between {constants.RCON_MAX_CLIENTS_MINIMUM} and "
                        f"{constants.RCON_MAX_CLIENTS_MAXIMUM}. Current value: {rcon.max_clients}"
                    ),
                    field="rcon.maxClients",
                    value=rcon.max_clients,
                    valid_range=f"{constants.RCON_MAX_CLIENTS_MINIMUM}-{constants.RCON_MAX_CLIENTS_MAXIMUM}",
                )
            )

    def _check_game(self, game: GameConfig, errors: list[ParserError]) -> None:
        if game.name and len(game.name) > constants.GAME_NAME_MAX_LENGTH:
            errors.append(
                ParserError(
                    type=ParserErrorType.GAME_NAME_TOO_LONG,
                    message=(
                        f"Game name cannot exceed {constants.GAME_NAME_MAX_LENGTH} characters. "
                        f"Current length: {len(game.name)}"
                    ),
                    field="game.name",
                    value=len(game.name),
                    valid_range=f"0-{constants.GAME_NAME_MAX_LENGTH} characters",
                )
            )

        if game.password_admin and " " in game.password_admin:
            errors.append(
                ParserError(
                    type=ParserErrorType.ADMIN_PASSWORD_CONTAINS_SPACES,
                    message="Admin password cannot contain spaces",
                    field="game.passwordAdmin",
                    value=game.password_admin,
                )
            )

        if len(game.admins) > constants.ADMINS_MAX_COUNT:
            errors.append(
                ParserError(
                    type=ParserErrorType.ADMINS_LIST_TOO_LONG,
                    message=(
                        f"Admins list cannot exceed {constants.ADMINS_MAX_COUNT} entries. "
                        f"Current count: {len(game.admins)}"
                    ),
                    field="game.admins",
                    value=len(game.admins),
                    valid_range=f"0-{constants.ADMINS_MAX_COUNT} entries",
                )
            )

        for index, platform in enumerate(game.supported_platforms):
            if platform not in constants.SUPPORTED_PLATFORMS:
                errors.append(
                    ParserError(
                        type=ParserErrorType.INVALID_SUPPORTED_PLATFORM,
                        message=(
                            f"Invalid supported platform: {platform}. "
                            f"Valid platforms: {', '.join(constants.SUPPORTED_PLATFORMS)}"
                        ),
                        field=f"game.supportedPlatforms[{index}]",
                        value=platform,
                        valid_range=" | ".join(constants.SUPPORTED_PLATFORMS),
                    )
                )

    def _check_game_properties(self, properties: GameProperties, errors: list[ParserError]) -> None:
        server_distance = properties.server_max_view_distance
        if not constants.VIEW_DISTANCE_MINIMUM <= server_distance <= constants.VIEW_DISTANCE_ABSOLUTE_MAX:
            errors.append(
                ParserError(
                    type=ParserErrorType.SERVER_VIEW_DISTANCE_OUT_OF_RANGE,
                    message=(
                        f"Server view distance must be between {constants.VIEW_DISTANCE_MINIMUM} and "
                        f"{constants.VIEW_DISTANCE_ABSOLUTE_MAX}. Current value: {server_distance}"
                    ),
                    field="game.gameProperties.serverMaxViewDistance",
                    value=server_distance,
                    valid_range=f"{constants.VIEW_DISTANCE_MINIMUM}-{constants.VIEW_DISTANCE_ABSOLUTE_MAX}",
                )
            )

        network_distance = properties.network_view_distance
        if not constants.VIEW_DISTANCE_MINIMUM <= network_distance <= constants.NETWORK_VIEW_DISTANCE_MAX:
            errors.append(
                ParserError(
                    type=ParserErrorType.NETWORK_VIEW_DISTANCE_OUT_OF_RANGE,
                    message=(
                        f"Network view distance must be between {constants.VIEW_DISTANCE_MINIMUM} and "
                        f"{constants.NETWORK_VIEW_DISTANCE_MAX}. Current value: {network_distance}"
                    ),
                    field="game.gameProperties.networkViewDistance",
                    value=network_distance,
                    valid_range=f"{constants.VIEW_DISTANCE_MINIMUM}-{constants.NETWORK_VIEW_DISTANCE_MAX}",
                )
            )

        grass = properties.server_min_grass_distance
        if grass != 0 and not constants.GRASS_DISTANCE_MINIMUM <= grass <= constants.GRASS_DISTANCE_MAXIMUM:
            errors.append(
                ParserError(
                    type=ParserErrorType.GRASS_DISTANCE_INVALID,
                    message=(
                        f"Grass distance must be 0 or between {constants.GRASS_DISTANCE_MINIMUM} and "
                        f"{constants.GRASS_DISTANCE_MAXIMUM}. Current value: {grass}"
                    ),
                    field="game.gameProperties.serverMinGrassDistance",
                    value=grass,
                    valid_range=f"0 | {constants.GRASS_DISTANCE_MINIMUM}-{constants.GRASS_DISTANCE_MAXIMUM}",
                )
            )

    def _check_operating(self, operating: OperatingConfig, errors: list[ParserError]) -> None:
        timeout = operating.slot_reservation_timeout
        if timeout is not None and not (
            constants.SLOT_RESERVATION_TIMEOUT_MINIMUM <= timeout <= constants.SLOT_RESERVATION_TIMEOUT_MAXIMUM
        ):
            errors.append(
                ParserError(
                    type=ParserErrorType.SLOT_RESERVATION_TIMEOUT_OUT_OF_RANGE,
                    message=(
                        f"Slot reservation timeout must be between {constants.SLOT_RESERVATION_TIMEOUT_MINIMUM} "
                        f"and {constants.SLOT_RESERVATION_TIMEOUT_MAXIMUM} seconds. Current value: {timeout}"
                    ),
                    field="operating.slotReservationTimeout",
                    value=timeout,
                    valid_range=(
                        f"{constants.SLOT_RESERVATION_TIMEOUT_MINIMUM}-"
                        f"{constants.SLOT_RESERVATION_TIMEOUT_MAXIMUM} seconds"
                    ),
                )
            )

        max_size = operating.join_queue.max_size if operating.join_queue else None
        if max_size is not None and not (
            constants.JOIN_QUEUE_MAX_SIZE_MINIMUM <= max_size <= constants.JOIN_QUEUE_MAX_SIZE_MAXIMUM
        ):
            errors.append(
                ParserError(
                    type=ParserErrorType.JOIN_QUEUE_MAX_SIZE_OUT_OF_RANGE,
                    message=(
                        f"Join queue maxSize must be between {constants.JOIN_QUEUE_MAX_SIZE_MINIMUM} and "
                        f"{constants.JOIN_QUEUE_MAX_SIZE_MAXIMUM}. Current value: {max_size}"
                    ),
                    field="operating.joinQueue.maxSize",
                    value=max_size,
                    valid_range=f"{constants.JOIN_QUEUE_MAX_SIZE_MINIMUM}-{constants.JOIN_QUEUE_MAX_SIZE_MAXIMUM}",
                )
            )

    # Warnings

    def _warn_view_distances(self, properties: GameProperties, warnings: list[ParserWarning]) -> None:
        server_distance = properties.server_max_view_distance
        network_distance = properties.network_view_distance
        field = "game.gameProperties.serverMaxViewDistance"

        if server_distance > constants.VIEW_DISTANCE_RECOMMENDED_MAX:
            warnings.append(
                ParserWarning(
                    type=ParserWarningType.VIEW_DISTANCE_EXCEEDS_RECOMMENDED,
                    message=(
                        f"Server view distance ({server_distance}) exceeds recommended maximum of "
                        f"{constants.VIEW_DISTANCE_RECOMMENDED_MAX}. This may impact server performance."
                    ),
                    field=field,
                    value=server_distance,
                    recommended_value=constants.VIEW_DISTANCE_RECOMMENDED_MAX,
                )
            )

        if server_distance > constants.VIEW_DISTANCE_ABSOLUTE_MAX:
            warnings.append(
                ParserWarning(
                    type=ParserWarningType.VIEW_DISTANCE_EXCEEDS_MAXIMUM,
                    message=(
                        f"Server view distance ({server_distance}) exceeds maximum supported value of "
                        f"{constants.VIEW_DISTANCE_ABSOLUTE_MAX}."
                    ),
                    field=field,
                    value=server_distance,
                    recommended_value=constants.VIEW_DISTANCE_ABSOLUTE_MAX,
                )
            )

        if server_distance < constants.VIEW_DISTANCE_MINIMUM:
            warnings.append(
                ParserWarning(
                    type=ParserWarningType.VIEW_DISTANCE_BELOW_MINIMUM,
                    message=(
                        f"Server view distance ({server_distance}) is below minimum recommended value of "
                        f"{constants.VIEW_DISTANCE_MINIMUM}."
                    ),
                    field=field,
                    value=server_distance,
                    recommended_value=constants.VIEW_DISTANCE_MINIMUM,
                )
            )

        if network_distance > server_distance:
            warnings.append(
                ParserWarning(
                    type=ParserWarningType.NETWORK_VIEW_DISTANCE_MISMATCH,
                    message=(
                        f"Network view distance ({network_distance}) should not exceed "
                        f"server view distance ({server_distance})."
                    ),
                    field="game.gameProperties.networkViewDistance",
                    value=network_distance,
                    recommended_value=math.floor(server_distance * constants.NETWORK_VIEW_DISTANCE_RECOMMENDED_RATIO),
                )
            )

    def _warn_player_count(self, game: GameConfig, warnings: list[ParserWarning]) -> None:
        if game.max_players > constants.PLAYER_COUNT_RECOMMENDED_MAX:
            warnings.append(
                ParserWarning(
                    type=ParserWarningType.PLAYER_COUNT_EXCEEDS_RECOMMENDED,
                    message=(
                        f"Player count ({game.max_players}) exceeds recommended maximum of "
                        f"{constants.PLAYER_COUNT_RECOMMENDED_MAX}. Consider server performance impact."
                    ),
                    field="game.maxPlayers",
                    value=game.max_players,
                    recommended_value=constants.PLAYER_COUNT_RECOMMENDED_MAX,
                )
            )

    def _warn_performance(
        self, properties: GameProperties, operating: OperatingConfig, warnings: list[ParserWarning]
    ) -> None:
        grass = properties.server_min_grass_distance
        if grass > constants.GRASS_DISTANCE_HIGH_PERFORMANCE_IMPACT:
            warnings.append(
                ParserWarning(
                    type=ParserWarningType.GRASS_DISTANCE_HIGH_PERFORMANCE_IMPACT,
                    message=f"Grass distance ({grass}) may significantly impact server performance.",
                    field="game.gameProperties.serverMinGrassDistance",
                    value=grass,
                    recommended_value=constants.GRASS_DISTANCE_HIGH_PERFORMANCE_IMPACT,
                )
            )

        # Zero or negative means unlimited/disabled and is never warned on
        ai_limit = operating.ai_limit
        if ai_limit > 0 and ai_limit > constants.AI_LIMIT_HIGH_PERFORMANCE_IMPACT:
            warnings.append(
                ParserWarning(
                    type=ParserWarningType.AI_LIMIT_HIGH_PERFORMANCE_IMPACT,
                    message=f"AI limit ({ai_limit}) may significantly impact server performance.",
                    field="operating.aiLimit",
                    value=ai_limit,
                    recommended_value=constants.AI_LIMIT_HIGH_PERFORMANCE_IMPACT,
                )
            )

    def _warn_security(self, game: GameConfig, rcon: RconConfig, warnings: list[ParserWarning]) -> None:
        if not game.password_admin or not game.password_admin.strip():
            warnings.append(
                ParserWarning(
                    type=ParserWarningType.EMPTY_ADMIN_PASSWORD,
                    message="Admin password is empty, you should probably reconsider this.",
                    field="game.passwordAdmin",
                    value=game.password_admin,
                )
            )

        # Reported alongside RCON_PASSWORD_TOO_SHORT on purpose
        if rcon.password and len(rcon.password) < constants.PASSWORD_MINIMUM_LENGTH:
            warnings.append(
                ParserWarning(
                    type=ParserWarningType.WEAK_RCON_PASSWORD,
                    message=(
                        f"RCON password is too short ({len(rcon.password)} characters). "
                        f"Recommended minimum: {constants.PASSWORD_MINIMUM_LENGTH} characters."
                    ),
                    field="rcon.password",
                    value=len(rcon.password),
                    recommended_value=constants.PASSWORD_MINIMUM_LENGTH,
                )
            )

    def _warn_mods(self, mods: list[Mod], warnings: list[ParserWarning]) -> None:
        seen: set[str] = set()
        for index, mod in enumerate(mods):
            field = f"game.mods[{index}].modId"
            if not is_valid_mod_id(mod.mod_id):
                warnings.append(
                    ParserWarning(
                        type=ParserWarningType.INVALID_MOD_ID,
                        message=(
                            f"Invalid mod ID format: {mod.mod_id}. Expected 16-character hexadecimal string. "
                            f"Mod: {get_effective_mod_name(mod)}"
                        ),
                        field=field,
                        value=mod.mod_id,
                    )
                )

            if mod.mod_id in seen:
                warnings.append(
                    ParserWarning(
                        type=ParserWarningType.DUPLICATE_MOD_ID,
                        message=f"Duplicate mod ID: {mod.mod_id}. Mod: {get_effective_mod_name(mod)}",
                        field=field,
                        value=mod.mod_id,
                    )
                )
            else:
                seen.add(mod.mod_id)

    def _warn_network(self, config: ServerConfig, warnings: list[ParserWarning]) -> None:
        public_address = config.public_address
        bind_address = config.bind_address
        if (
            public_address
            and bind_address
            and bind_address != constants.ANY_ADDRESS
            and public_address != bind_address
            and "local" not in public_address
        ):
            warnings.append(
                ParserWarning(
                    type=ParserWarningType.PUBLIC_ADDRESS_MISMATCH,
                    message=(
                        f"Public address ({public_address}) differs from bind address ({bind_address}). "
                        "Verify this is correct for your network setup."
                    ),
                    field="publicAddress",
                    value=public_address,
                    recommended_value=bind_address,
                )
            )

        ports = [config.bind_port, config.a2s.port, config.rcon.port]
        if len(set(ports)) != len(ports):
            warnings.append(
                ParserWarning(
                    type=ParserWarningType.PORT_CONFLICT,
                    message=(
                        f"Port conflict detected. Bind port: {config.bind_port}, "
                        f"A2S port: {config.a2s.port}, RCON port: {config.rcon.port}"
                    ),
                    field="ports",
                )
            )
