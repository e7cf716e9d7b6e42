#!/usr/bin/env python3
import argparse
import asyncio
import json
import sys

import websockets
from models.schemas import DashboardState
from services.render import render_dashboard

CLEAR_SCREEN = "\033[2J\033[H"


class DashboardClient:
    def __init__(self, websocket_url: str, toggle: bool = False):
        self.websocket_url = websocket_url
        self.toggle = toggle
        self.websocket = None
        self.update_count = 0

    async def connect_websocket(self) -> bool:
        """Connect to server via WebSocket"""
        try:
            print(f"🔌 Connecting to {self.websocket_url}...")
            self.websocket = await websockets.connect(self.websocket_url)
            print("✅ Connected to server!")
            return True
        except websockets.exceptions.InvalidURI:
            print(f"❌ Invalid URL: {self.websocket_url}")
            print("   Use: ws://localhost:8000/ws-dashboard")
            return False
        except websockets.exceptions.InvalidStatus as e:
            print(f"❌ Server rejected WebSocket connection: {e}")
            print(f"   HTTP Status: {e.response.status_code}")
            print("   Check:")
            print("   - If server is running")
            print("   - If path is correct (/ws-dashboard)")
            return False
        except ConnectionRefusedError:
            print("❌ Connection refused")
            print("   Check if server is running on the correct port")
            return False
        except OSError as e:
            print(f"❌ WebSocket connection error: {type(e).__name__}: {e}")
            return False

    async def send_toggle(self):
        """Ask the server to pause or resume the stream"""
        await self.websocket.send(json.dumps({"type": "toggle"}))

    def handle_message(self, raw: str):
        try:
            message = json.loads(raw)
        except json.JSONDecodeError:
            print(f"⚠️ Invalid message from server: {raw[:100]}")
            return
        if not isinstance(message, dict):
            print(f"⚠️ Unexpected message from server: {raw[:100]}")
            return

        msg_type = message.pop("type", None)

        if msg_type == "state":
            state = DashboardState.model_validate(message)
            self.update_count += 1
            print(CLEAR_SCREEN + render_dashboard(state))
            print("\n💡 Press Ctrl+C to stop")
        elif msg_type == "error":
            print(f"⚠️ Server error: {message.get('message')}")

    async def run(self):
        """Run main loop"""
        if not await self.connect_websocket():
            return

        try:
            if self.toggle:
                await self.send_toggle()

            async for raw in self.websocket:
                self.handle_message(raw)

        except websockets.exceptions.ConnectionClosed:
            print("\n❌ WebSocket connection closed")
        finally:
            await self.cleanup()

    async def cleanup(self):
        """Release resources"""
        if self.websocket:
            await self.websocket.close()
        print(f"✅ Disconnected after {self.update_count} updates")


def main():
    parser = argparse.ArgumentParser(
        description="Terminal dashboard - renders live temperature readings from the server"
    )
    parser.add_argument(
        "--url", "-u",
        type=str,
        default="ws://localhost:8000/ws-dashboard",
        help="WebSocket server URL (default: ws://localhost:8000/ws-dashboard)"
    )
    parser.add_argument(
        "--toggle",
        action="store_true",
        help="Pause/resume the stream once after connecting"
    )

    args = parser.parse_args()

    # Check URL format
    if not args.url.startswith(('ws://', 'wss://')):
        print("⚠️  URL must start with ws:// or wss://")
        print(f"   You provided: {args.url}")
        print("\n   Example:")
        print("   python dashboard_client.py --url ws://localhost:8000/ws-dashboard")
        sys.exit(1)

    client = DashboardClient(args.url, toggle=args.toggle)

    try:
        asyncio.run(client.run())
    except KeyboardInterrupt:
        print("\n✅ Shutdown complete")


if __name__ == "__main__":
    main()
