#!/usr/bin/env python3
"""
Status Server Development Script
Probes a running server and starts one locally
"""

import json
import os
import sys
import time

import requests

DEFAULT_BASE_URL = os.getenv("STATUS_SERVER_URL", "http://localhost:3000")

def check_health(base_url=DEFAULT_BASE_URL):
    """Check server health"""
    print("Checking server health...")
    try:
        response = requests.get(f"{base_url}/health", timeout=5)
        if response.status_code == 200 and response.json().get("status") == "healthy":
            print("✅ Server is healthy")
            print(f"Response: {response.json()}")
            return True
        print(f"❌ Server health check failed: {response.status_code}")
    except requests.exceptions.RequestException as e:
        print(f"❌ Cannot connect to server: {e}")
    return False

def check_server_info(base_url=DEFAULT_BASE_URL):
    """Check server info"""
    print("Checking server info...")
    try:
        response = requests.get(f"{base_url}/api/info", timeout=5)
        if response.status_code == 200:
            print("✅ Server info retrieved")
            print(f"Response: {json.dumps(response.json(), indent=2)}")
            return True
        print(f"❌ Server info check failed: {response.status_code}")
    except requests.exceptions.RequestException as e:
        print(f"❌ Cannot connect to server: {e}")
    return False

def check_status_page(base_url=DEFAULT_BASE_URL):
    """Check that the status page renders"""
    print("Checking status page...")
    try:
        response = requests.get(f"{base_url}/", timeout=5)
        if response.status_code == 200 and "Application Running Successfully" in response.text:
            print("✅ Status page rendered")
            return True
        print(f"❌ Status page check failed: {response.status_code}")
    except requests.exceptions.RequestException as e:
        print(f"❌ Cannot connect to server: {e}")
    return False

def wait_for_server(base_url=DEFAULT_BASE_URL, max_attempts=30, interval=2):
    """Wait for server to be ready"""
    print("Waiting for server to be ready...")
    for attempt in range(max_attempts):
        try:
            response = requests.get(f"{base_url}/health", timeout=2)
            if response.status_code == 200:
                print("✅ Server is ready!")
                return True
        except requests.exceptions.RequestException:
            pass
        print(f"Attempt {attempt + 1}/{max_attempts}...")
        time.sleep(interval)

    print("❌ Server failed to start within timeout")
    return False

def serve():
    """Start the server in this process"""
    from status_server.main import main as run_server
    run_server()

def usage():
    print("Usage: python dev.py <command> [base_url]")
    print("Commands:")
    print("  serve     - Start the server")
    print("  health    - Check server health")
    print("  info      - Check server info")
    print("  page      - Check the status page")
    print("  wait      - Wait until the server answers /health")
    print("  check     - Run health, info and page checks")

def main(argv=None):
    """Main function"""
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        usage()
        sys.exit(1)

    command = argv[0]
    base_url = argv[1].rstrip("/") if len(argv) > 1 else DEFAULT_BASE_URL

    if command == "serve":
        serve()
        return

    if command == "health":
        ok = check_health(base_url)
    elif command == "info":
        ok = check_server_info(base_url)
    elif command == "page":
        ok = check_status_page(base_url)
    elif command == "wait":
        ok = wait_for_server(base_url)
    elif command == "check":
        results = [
            check_health(base_url),
            check_server_info(base_url),
            check_status_page(base_url),
        ]
        ok = all(results)
    else:
        print(f"Unknown command: {command}")
        usage()
        sys.exit(1)

    if not ok:
        sys.exit(1)

if __name__ == "__main__":
    main()
