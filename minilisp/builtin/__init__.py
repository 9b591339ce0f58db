from minilisp.builtin.env_builtin import register, standard_environment

__all__ = ["register", "standard_environment"]
