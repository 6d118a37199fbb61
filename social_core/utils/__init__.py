from .map_to_dict import map_friend_request_to_public_dict, map_post_to_public_dict, map_message_to_public_dict
