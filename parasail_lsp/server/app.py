"""ParaSail language server.

Wires the analysis engine into pygls. The handlers here only fetch document
text and settings, call the engine and convert results; all analysis lives
in parasail_lsp.analysis.
"""

from __future__ import annotations

import logging
from typing import Any

from lsprotocol import types as lsp
from pygls.lsp.server import LanguageServer

from parasail_lsp import __version__
from parasail_lsp.analysis.engine import AnalysisEngine
from parasail_lsp.config.schema import ServerConfig, Settings
from parasail_lsp.config.settings import SettingsStore, parse_settings
from parasail_lsp.core.constants import SERVER_NAME, SETTINGS_SECTION
from parasail_lsp.core.errors import ConfigError
from parasail_lsp.core.types import Diagnostic
from parasail_lsp.server.bootstrap import attach_client_logging
from parasail_lsp.server.convert import (
    from_lsp_completion,
    to_lsp_completion,
    to_lsp_diagnostic,
    to_lsp_edit,
    to_lsp_hover,
    to_lsp_symbol,
    to_position,
)
from parasail_lsp.server.validation import ValidationCoordinator

logger = logging.getLogger(__name__)

TRIGGER_CHARACTERS = [".", ":", "<", '"', "/"]


class ParasailLanguageServer(LanguageServer):
    """LanguageServer holding the engine, settings and validation state."""

    def __init__(self, config: ServerConfig, engine: AnalysisEngine | None = None) -> None:
        super().__init__(
            SERVER_NAME,
            f"v{__version__}",
            text_document_sync_kind=lsp.TextDocumentSyncKind.Incremental,
        )
        self.config = config
        self.engine = engine or AnalysisEngine.from_config(config)
        self.settings = SettingsStore(config.settings)
        self.validation = ValidationCoordinator(
            self.engine, self.publish_diagnostics, config.validation_policy
        )
        self.supports_configuration = False

    def document_text(self, uri: str) -> str | None:
        """Current text of an open document, or None if it isn't open."""
        document = self.workspace.text_documents.get(uri)
        return document.source if document is not None else None

    def open_uris(self) -> list[str]:
        return list(self.workspace.text_documents)

    def publish_diagnostics(self, uri: str, diagnostics: list[Diagnostic]) -> None:
        self.text_document_publish_diagnostics(lsp.PublishDiagnosticsParams(
            uri=uri,
            diagnostics=[to_lsp_diagnostic(d) for d in diagnostics],
        ))

    def validate(self, uri: str) -> None:
        text = self.document_text(uri)
        if text is None:
            return
        self.validation.request(uri, text, self.settings.for_document(uri))

    def apply_settings(self, settings: Settings) -> None:
        """Replace global settings and re-validate every open document."""
        self.settings.replace(settings)
        self.engine.reload_library(settings.library_paths)
        for uri in self.open_uris():
            self.validate(uri)

    async def fetch_settings(self, scope_uri: str | None) -> Settings | None:
        """Ask the client for settings scoped to a document.

        Returns None when the client doesn't support the request or sends
        something unusable.
        """
        if not self.supports_configuration:
            return None
        try:
            result = await self.workspace_configuration_async(lsp.ConfigurationParams(
                items=[lsp.ConfigurationItem(scope_uri=scope_uri, section=SETTINGS_SECTION)],
            ))
        except Exception:
            logger.warning("workspace/configuration request failed", exc_info=True)
            return None
        payload = result[0] if result else None
        try:
            return parse_settings(payload, self.settings.global_settings)
        except ConfigError as e:
            logger.warning("Ignoring client settings: %s", e.message)
            return None


def _settings_payload(settings: Any) -> Any:
    """Pull the parasailServer section out of a didChangeConfiguration payload."""
    if isinstance(settings, dict):
        return settings.get(SETTINGS_SECTION)
    return None


def create_server(config: ServerConfig, engine: AnalysisEngine | None = None) -> ParasailLanguageServer:
    """Build a server with every feature handler registered."""
    server = ParasailLanguageServer(config, engine)

    @server.feature(lsp.INITIALIZE)
    def initialize(params: lsp.InitializeParams) -> None:
        workspace_caps = params.capabilities.workspace
        server.supports_configuration = bool(workspace_caps and workspace_caps.configuration)
        attach_client_logging(server)
        options = params.initialization_options
        payload = _settings_payload(options) if isinstance(options, dict) else None
        if payload:
            try:
                server.settings.replace(parse_settings(payload, server.settings.global_settings))
                server.engine.reload_library(server.settings.global_settings.library_paths)
            except ConfigError as e:
                logger.warning("Ignoring initializationOptions: %s", e.message)
        logger.info("Initialized (configuration requests: %s)", server.supports_configuration)

    @server.feature(lsp.WORKSPACE_DID_CHANGE_CONFIGURATION)
    async def did_change_configuration(params: lsp.DidChangeConfigurationParams) -> None:
        payload = _settings_payload(params.settings)
        if payload is None:
            settings = await server.fetch_settings(None)
        else:
            try:
                settings = parse_settings(payload, server.settings.global_settings)
            except ConfigError as e:
                logger.warning("Ignoring configuration change: %s", e.message)
                return
        if settings is not None:
            server.apply_settings(settings)

    @server.feature(lsp.TEXT_DOCUMENT_DID_OPEN)
    async def did_open(params: lsp.DidOpenTextDocumentParams) -> None:
        uri = params.text_document.uri
        settings = await server.fetch_settings(uri)
        # Closed while the configuration request was pending
        if server.document_text(uri) is None:
            return
        if settings is not None:
            server.settings.set_document(uri, settings)
        server.validate(uri)

    @server.feature(lsp.TEXT_DOCUMENT_DID_CHANGE)
    def did_change(params: lsp.DidChangeTextDocumentParams) -> None:
        server.validate(params.text_document.uri)

    @server.feature(lsp.TEXT_DOCUMENT_DID_CLOSE)
    def did_close(params: lsp.DidCloseTextDocumentParams) -> None:
        uri = params.text_document.uri
        server.settings.forget(uri)
        server.validation.forget(uri)
        server.publish_diagnostics(uri, [])

    @server.feature(
        lsp.TEXT_DOCUMENT_COMPLETION,
        lsp.CompletionOptions(trigger_characters=TRIGGER_CHARACTERS, resolve_provider=True),
    )
    def completion(params: lsp.CompletionParams) -> lsp.CompletionList:
        uri = params.text_document.uri
        text = server.document_text(uri)
        if text is None:
            return lsp.CompletionList(is_incomplete=False, items=[])
        items = server.engine.complete(
            text, to_position(params.position), server.settings.for_document(uri)
        )
        return lsp.CompletionList(is_incomplete=False, items=[to_lsp_completion(i) for i in items])

    @server.feature(lsp.COMPLETION_ITEM_RESOLVE)
    def completion_resolve(item: lsp.CompletionItem) -> lsp.CompletionItem:
        if item.documentation is None:
            resolved = server.engine.resolve(from_lsp_completion(item))
            item.documentation = resolved.documentation
        return item

    @server.feature(lsp.TEXT_DOCUMENT_HOVER)
    def hover(params: lsp.HoverParams) -> lsp.Hover | None:
        text = server.document_text(params.text_document.uri)
        if text is None:
            return None
        result = server.engine.hover(text, to_position(params.position))
        return to_lsp_hover(result) if result else None

    @server.feature(lsp.TEXT_DOCUMENT_FORMATTING)
    def formatting(params: lsp.DocumentFormattingParams) -> list[lsp.TextEdit]:
        uri = params.text_document.uri
        text = server.document_text(uri)
        if text is None:
            return []
        edits = server.engine.format(text, params.options.tab_size, server.settings.for_document(uri))
        return [to_lsp_edit(e) for e in edits]

    @server.feature(lsp.TEXT_DOCUMENT_DOCUMENT_SYMBOL)
    def document_symbol(params: lsp.DocumentSymbolParams) -> list[lsp.DocumentSymbol]:
        text = server.document_text(params.text_document.uri)
        if text is None:
            return []
        return [to_lsp_symbol(s) for s in server.engine.outline(text)]

    @server.feature(lsp.SHUTDOWN)
    async def shutdown(params: None) -> None:
        await server.validation.shutdown()

    return server


def run_server(
    config: ServerConfig,
    *,
    tcp: bool = False,
    host: str = "127.0.0.1",
    port: int = 2087,
) -> None:
    """Run the server until the client disconnects."""
    server = create_server(config)
    if tcp:
        logger.info("Listening on %s:%d", host, port)
        server.start_tcp(host, port)
    else:
        server.start_io()
