"""
core package: discovery handling for the voice assistant skill.

- capabilities: fixed capability templates and protocol constants
- translator: device record -> endpoint descriptor
- context: completion context (success/error callbacks, fired exactly once)
- discovery: fetch, translate and assemble the discovery response
- skill: route inbound directives to their handler
"""
