"""Run scripts, packages and profiles at boot and login on managed Macs."""
