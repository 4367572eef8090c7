#!/usr/bin/env python3
"""
Gateway CLI - Interface de linha de comando para enviar reports ao backoffice.

Permite:
- Configurar URL e header (gateway identifier, vendor, time, hash/secret)
- Adicionar reports à queue (ZCL report, multi report, command, time)
- Remover/limpar reports
- Ver o payload composto
- Enviar a queue para o backoffice

Os valores iniciais vêm do .env (JOA_URL, JOA_GATEWAY_IDENTIFIER, ...).
"""

import cmd
import shlex
import sys
import time
from dataclasses import replace
from typing import List, Optional

from joa.client import JOAClient
from joa.protocol.header import HeaderConfig
from joa.transport.http_transport import HttpTransport
from joa.utils.config import config
from joa.utils.logger import get_logger, setup_logger

logger = get_logger("gateway_cli")


def _optional(value: str) -> Optional[str]:
    # "-" marca um campo vazio (usa o default do protocolo)
    return None if value in ("-", "") else value


def _parse_bool(value: str) -> bool:
    return value.lower() in ("1", "true", "yes", "on")


class GatewayCLI(cmd.Cmd):
    """CLI interativa para compor e enviar payloads JOA."""

    intro = """
===================================================================
                 JOA Gateway - CLI Interface
===================================================================

Digite 'help' para ver comandos disponíveis.
Digite 'exit' ou Ctrl+D para sair.
"""
    prompt = "gateway> "

    def __init__(self, client: Optional[JOAClient] = None):
        """Inicializa a CLI."""
        super().__init__()

        if client is None:
            client = JOAClient(config.url, transport=HttpTransport(timeout=config.http_timeout))
            client.set_headers(config.header_config())

        self.client = client

    # ========================================================================
    # CONFIGURAÇÃO
    # ========================================================================

    def do_url(self, arg):
        """
        Mostra ou define o URL do backoffice.

        Uso: url [<url>]
        """
        if arg.strip():
            self.client.set_url(arg.strip())
        print(f"  URL: {self.client.url}")

    def do_header(self, arg):
        """
        Mostra ou altera o header.

        Uso: header
             header gateway <ip>
             header vendor <nome>
             header time on|off
             header hash on|off
             header secret <secret>
        """
        args = shlex.split(arg)
        current = self.client.header

        if args:
            if len(args) != 2:
                print("  Uso: header <campo> <valor>")
                return

            key, value = args
            attrs = current.attributes
            if key == "gateway":
                current = replace(current, gateway_identifier=_optional(value))
            elif key == "vendor":
                current = replace(current, attributes=replace(attrs, vendor=_optional(value)))
            elif key == "time":
                current = replace(current, attributes=replace(attrs, time=_parse_bool(value)))
            elif key == "hash":
                current = replace(current, attributes=replace(attrs, hash=_parse_bool(value)))
            elif key == "secret":
                current = replace(current, attributes=replace(attrs, secret=_optional(value)))
            else:
                print(f"  Campo desconhecido: {key}")
                return

            self.client.set_headers(current)

        self._print_header(current)

    # ========================================================================
    # QUEUE
    # ========================================================================

    def do_report(self, arg):
        """
        Adiciona um ZCL report.

        Uso: report <eui64> <endpoint|-> <profile|-> <cluster> <attribute> <datatype> <value> [timestamp]
        """
        args = self._split(arg, 7, 8)
        if args is None:
            return

        eui64, endpoint, profile, cluster, attribute, datatype, value = args[:7]
        report = self.client.add_zcl_report(
            eui64, _optional(endpoint), _optional(profile), cluster,
            attribute, datatype, self._timestamp(args, 7), value,
        )
        print(f"  Adicionado: {report}")

    def do_multireport(self, arg):
        """
        Adiciona um ZCL multi report.

        Uso: multireport <eui64> <endpoint|-> <profile|-> <cluster> <attribute> <datatype> <offset> <v1,v2,...> [timestamp]
        """
        args = self._split(arg, 8, 9)
        if args is None:
            return

        eui64, endpoint, profile, cluster, attribute, datatype, offset, values = args[:8]
        report = self.client.add_zcl_multi_report(
            eui64, _optional(endpoint), _optional(profile), cluster,
            attribute, datatype, self._timestamp(args, 8), offset, values.split(","),
        )
        print(f"  Adicionado: {report}")

    def do_command(self, arg):
        """
        Adiciona um ZCL command.

        Uso: command <eui64> <endpoint|-> <profile|-> <cluster> <cluster_specific> <command> <value> [timestamp]
        """
        args = self._split(arg, 7, 8)
        if args is None:
            return

        eui64, endpoint, profile, cluster, specific, command, value = args[:7]
        report = self.client.add_zcl_command(
            eui64, _optional(endpoint), _optional(profile), cluster,
            _parse_bool(specific), command, self._timestamp(args, 7), value,
        )
        print(f"  Adicionado: {report}")

    def do_time(self, arg):
        """
        Adiciona uma indicação de tempo.

        Uso: time [timestamp]
        """
        args = self._split(arg, 0, 1)
        if args is None:
            return

        report = self.client.add_time(self._timestamp(args, 0))
        print(f"  Adicionado: {report}")

    def do_remove(self, arg):
        """
        Remove um report da queue.

        Uso: remove <id>
        """
        try:
            message_id = int(arg.strip())
        except ValueError:
            print("  Uso: remove <id>")
            return

        if self.client.remove_message(message_id):
            print(f"  Report {message_id} removido")
        else:
            print(f"  Report {message_id} não existe")

    def do_clear(self, arg):
        """
        Limpa a queue.

        Uso: clear
        """
        self.client.clear_messages()
        print("  Queue limpa")

    def do_queue(self, arg):
        """
        Mostra os reports pendentes.

        Uso: queue
        """
        messages = self.client.messages
        if not messages:
            print("  (queue vazia)")
            return

        for report in messages:
            print(f"  {report.id:>4}  {report.to_line().rstrip()!r}")
        print(f"\n  Total: {len(messages)}")

    # ========================================================================
    # PAYLOAD
    # ========================================================================

    def do_payload(self, arg):
        """
        Mostra o payload composto (sem enviar).

        Uso: payload
        """
        result = self.client.compose()
        if result.ok:
            print(result.payload, end="")
        else:
            print(f"  Erro: {result.code}")

    def do_post(self, arg):
        """
        Envia a queue para o backoffice.

        Uso: post
        """
        result = self.client.post()
        if result.ok:
            print(f"  Enviado. Resposta: {result.response!r}")
        else:
            print(f"  Erro: {result.error}")

    # ========================================================================
    # SAIR
    # ========================================================================

    def do_exit(self, arg):
        """
        Sai do CLI.

        Uso: exit
        """
        print("\n Até logo!\n")
        return True

    def do_quit(self, arg):
        """Alias para exit."""
        return self.do_exit(arg)

    def do_EOF(self, arg):
        """Handle Ctrl+D."""
        print()
        return self.do_exit(arg)

    # ========================================================================
    # MÉTODOS AUXILIARES
    # ========================================================================

    def _split(self, arg: str, minimum: int, maximum: int) -> Optional[List[str]]:
        args = shlex.split(arg)
        if not (minimum <= len(args) <= maximum):
            print(f"  Número de argumentos inválido ({len(args)})")
            return None
        return args

    def _timestamp(self, args: List[str], index: int) -> int:
        """Timestamp em ms: argumento opcional ou hora atual."""
        if len(args) > index:
            return int(args[index])
        return int(time.time() * 1000)

    def _print_header(self, header: HeaderConfig):
        attrs = header.attributes
        print(f"  gateway: {header.gateway_identifier}")
        print(f"  vendor:  {attrs.vendor}")
        print(f"  time:    {attrs.time}")
        print(f"  hash:    {attrs.hash}")
        print(f"  secret:  {'(definido)' if attrs.secret else '(vazio)'}")

    def onecmd(self, line):
        try:
            return super().onecmd(line)
        except ValueError as e:
            print(f"  Valor inválido: {e}")
            return False

    def emptyline(self):
        """Não faz nada quando linha vazia (não repete último comando)."""
        pass


def main():
    """Main function."""
    setup_logger("gateway_cli")
    logger.info(f"Gateway CLI iniciada (url={config.url})")
    try:
        GatewayCLI().cmdloop()
    except KeyboardInterrupt:
        print("\n\n Até logo!\n")
        sys.exit(0)


if __name__ == "__main__":
    main()
