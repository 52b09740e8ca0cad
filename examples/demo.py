# FrpClient Example Usage
#
# Point FRPC_ADDR / FRPS_ADDR below at the webServer of a running frpc and frps.

import asyncio

from frp_client import FrpClient, configure_logging, model, ProxyList, ServerInfo, TEXT

FRPC_ADDR = "http://127.0.0.1:7400"
FRPS_ADDR = "http://127.0.0.1:7500"


async def client_side():
    """Demonstrate the frpc endpoints."""
    async with FrpClient(FRPC_ADDR, "admin", "admin") as frpc:
        print("1. Proxy status:")
        status = await frpc.get_status()
        if status.is_success:
            for proxy_type, proxies in (status.data or {}).items():
                for proxy in proxies:
                    print(f"   [{proxy_type}] {proxy['name']}: {proxy['status']}")
        else:
            print(f"   Error: {status.message}")

        print()

        print("2. Read, update and reload the configuration:")
        config = await frpc.get_config()
        if not config.is_success:
            print(f"   Error: {config.message}")
            return

        print(f"   Current config is {len(config.data)} characters")
        updated = await frpc.update_config(config.data + "\n# touched by demo.py\n")
        print(f"   Update: {'ok' if updated else updated.message}")
        reloaded = await frpc.reload_config()
        print(f"   Reload: {'ok' if reloaded else reloaded.message}")

        print()

        # Stopping frpc ends the demo for the client side, so it is only shown
        print("3. Stop frpc (not executed):")
        print("   result = await frpc.stop()  # succeeds even if frpc exits mid-reply")


async def server_side():
    """Demonstrate the frps endpoints with typed models."""
    async with FrpClient(FRPS_ADDR, "admin", "admin", timeout=5) as frps:
        print("4. Server info:")
        info = await frps.get_server_info(decoder=model(ServerInfo))
        if info.is_success:
            print(f"   frps {info.data.version}, {info.data.client_counts} clients, "
                  f"{info.data.cur_conns} connections")
        else:
            print(f"   Error: {info.message}")

        print()

        print("5. TCP proxies and their traffic:")
        proxies = await frps.get_proxies_by_type("tcp", decoder=model(ProxyList))
        if proxies.is_success:
            for proxy in proxies.data.proxies:
                traffic = await frps.get_traffic_by_proxy(proxy.name)
                today_in = traffic.data["trafficIn"][0] if traffic and traffic.data else 0
                print(f"   {proxy.name}: {proxy.status}, {today_in} bytes in today")
        else:
            print(f"   Error: {proxies.message}")

        print()

        print("6. Error handling:")
        missing = await frps.get_traffic_by_proxy("nonexistent-proxy", decoder=TEXT)
        print(f"   Success: {missing.is_success}")
        print(f"   Kind: {missing.kind.value if missing.kind else None}")
        print(f"   Status: {missing.status_code}")
        print(f"   Message: {missing.message}")
        # Only failures that never reached the server are worth retrying blindly
        print(f"   Reached server: {missing.reached_server}")


def main():
    print("=== FrpClient Demo ===\n")
    configure_logging(log_level="WARNING")

    asyncio.run(client_side())
    print()
    asyncio.run(server_side())

    print("\n=== Demo Complete ===")


if __name__ == "__main__":
    main()
