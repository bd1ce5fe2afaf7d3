from s3region.config import RegionConfig

config = RegionConfig(
    id="test",
    default_region="eu-west-1",
    providers={
        "minio": {
            "regions": ["local-minio"],
            "endpoint": "http://minio.local:9000",
        },
        "cf": {
            "regions": ["waw3-1", "waw3-2", "waw4-1"],
            "endpoint": "https://s3.{region}.cloudferro.com",
        },
        "otc": {
            "regions": ["eu-nl", "eu-de"],
            "endpoint": "obs.{region}.otc.t-systems.com",
        },
    },
)
